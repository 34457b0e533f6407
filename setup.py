from setuptools import find_namespace_packages, setup

setup(
    name="pySounding",
    version="0.11.1",
    author="daryl herzmann",
    author_email="akrherz@gmail.com",
    packages=find_namespace_packages(where="src", include=["pysounding*"]),
    package_dir={"": "src"},
    keywords=["weather", "sounding", "meteorology", "skew-t"],
    classifiers=[],
    license="Apache",
    description=(
        "Data model for atmospheric soundings with pressure as the "
        "vertical coordinate."
    ),
    python_requires=">=3.9",
    install_requires=[
        "metpy",
        "numpy",
        "pandas",
        "pydantic>=2",
        "shapely",
    ],
    extras_require={
        "test": ["mock", "pytest"],
    },
    include_package_data=True,
)
