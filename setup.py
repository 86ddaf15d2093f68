"""Setup script for optbridge."""

from pathlib import Path

from setuptools import find_packages, setup


def read_version():
    """Read __version__ from the package without importing it."""
    init_py = Path(__file__).parent / "optbridge" / "__init__.py"
    for line in init_py.read_text().splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip('"')
    raise RuntimeError("Unable to find __version__ in optbridge/__init__.py")


setup(
    name="optbridge",
    version=read_version(),
    description="Object-oriented get/add/update/delete access to a key-value options store",
    python_requires=">=3.10",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.1",
        "dependency-injector>=4.41",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "sqlalchemy>=2.0",
        'tomli>=2.0; python_version < "3.11"',
    ],
    extras_require={
        "test": ["pytest>=7.4"],
    },
    entry_points={
        "console_scripts": [
            "optbridge=optbridge.__main__:main",
        ],
    },
)
