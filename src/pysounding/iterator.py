"""Walk a sounding level by level, splicing in the surface observation.

Soundings keep the upper air profile and the surface observation apart,
since they usually come from different instruments and the surface is not
reliably the first level of the profile (a model's lowest level sits above
the ground).  Consumers want one seamless vertical sequence, so the merge
below works out where the surface row belongs:

1. The profile is walked from the ground up, whichever order it is stored in.
2. The surface row goes immediately before the first level whose pressure is
   strictly less than the station pressure, or last if there is none.
3. Levels with a missing pressure keep their stored position and are never
   compared.
4. A level at exactly the station pressure is settled by :class:`TieBreak`.

The merge only computes an order of storage indexes.  Rows are built as the
iterator is advanced, so walking a sounding copies nothing up front.
"""

from typing import Optional, Sequence, Tuple

from pysounding.enums import TieBreak
from pysounding.optional import OptionalValue
from pysounding.reference import DEFAULT_TIE_BREAK
from pysounding.util import LOG

# Placeholder within a merge plan for the surface row
SURFACE_SLOT = None


def storage_is_top_down(pressures: Sequence[OptionalValue]) -> bool:
    """Is the profile stored from the top of the atmosphere down.

    Only the first and last present pressures are considered, a profile
    with fewer than two present pressures is taken to be stored ground up.
    """
    present = [p.value for p in pressures if p.is_present]
    if len(present) < 2:
        return False
    return present[0] < present[-1]


def merge_plan(
    pressures: Sequence[OptionalValue],
    surface_pressure: OptionalValue,
    tie_break: TieBreak = DEFAULT_TIE_BREAK,
) -> Tuple[Optional[int], ...]:
    """Compute the bottom up order of rows for a sounding.

    Args:
      pressures: the pressure profile in storage order
      surface_pressure: the station pressure
      tie_break (TieBreak): how to settle a level at the station pressure

    Returns:
      tuple of storage indexes, with ``SURFACE_SLOT`` marking the surface row
    """
    tie_break = TieBreak(tie_break)
    walk = list(range(len(pressures)))
    if storage_is_top_down(pressures):
        LOG.debug("Profile stored top down, walking it in reverse")
        walk.reverse()
    if surface_pressure.is_missing:
        return tuple(walk)
    sfc = surface_pressure.value
    ties = [i for i in walk if pressures[i] == sfc]
    if ties and tie_break == TieBreak.PROFILE:
        LOG.debug("Dropping surface row, %s levels at %s", len(ties), sfc)
        return tuple(walk)
    if ties and tie_break == TieBreak.SURFACE:
        LOG.debug(
            "Dropping %s levels tied with surface at %s", len(ties), sfc
        )
        tied = set(ties)
        walk = [i for i in walk if i not in tied]
    pos = len(walk)
    for j, idx in enumerate(walk):
        if pressures[idx] < sfc:
            pos = j
            break
    walk.insert(pos, SURFACE_SLOT)
    return tuple(walk)


class ProfileIterator:
    """Iterator over the data rows of a sounding.

    Each instance walks a merge plan once.  Ask the sounding for a new one,
    via ``bottom_up()`` or ``top_down()``, to start over.
    """

    def __init__(self, sounding, plan: Sequence[Optional[int]], reverse=False):
        """Constructor.

        Args:
          sounding (Sounding): the source of the rows, read only
          plan: bottom up merge plan as computed by :func:`merge_plan`
          reverse (bool): walk the plan top down
        """
        self._src = sounding
        self._plan = tuple(plan)
        self._step = -1 if reverse else 1
        self._next = len(self._plan) - 1 if reverse else 0
        self._remaining = len(self._plan)

    def __iter__(self):
        """We are our own iterator."""
        return self

    def __next__(self):
        """Return the next DataRow."""
        if self._remaining == 0:
            raise StopIteration
        slot = self._plan[self._next]
        self._next += self._step
        self._remaining -= 1
        if slot is SURFACE_SLOT:
            return self._src.surface_as_data_row()
        return self._src.get_data_row(slot)

    def __len__(self):
        """Number of rows left."""
        return self._remaining
