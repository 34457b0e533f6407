"""Custom Exceptions."""


class LengthMismatch(ValueError):
    """A profile length conflicts with the sounding's level count."""

    def __init__(self, kind, expected: int, got: int):
        """Constructor."""
        self.kind = kind
        self.expected = expected
        self.got = got
        super().__init__(
            f"{kind} profile has {got} levels, but the sounding has "
            f"{expected} levels"
        )


class MissingValueError(ValueError):
    """Attempt to read the value of a missing quantity."""


class ValidationError(Exception):
    """Raised when a sounding fails validation."""

    def __init__(self, problems):
        """Constructor with the list of problems found."""
        self.problems = list(problems)
        super().__init__(
            "Error validating sounding: " + "; ".join(self.problems)
        )
