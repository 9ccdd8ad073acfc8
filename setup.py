from pathlib import Path
import re

from setuptools import find_packages, setup

HERE = Path(__file__).parent


def _read_version() -> str:
    """Read __version__ from the package without importing it."""
    init = (HERE / "src" / "consolidate" / "__init__.py").read_text(encoding="utf-8")
    match = re.search(r"^__version__ = ['\"]([^'\"]+)['\"]", init, re.M)
    if not match:
        raise RuntimeError("__version__ not found in src/consolidate/__init__.py")
    return match.group(1)


setup(
    name="consolidate",
    version=_read_version(),
    description="Concatenate project files into framed, per-job consolidated dumps",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src", include=["consolidate", "consolidate.*"]),
    install_requires=[
        "rich>=13.0",
        "pathspec>=0.11",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "consolidate=consolidate.cli:main",
        ],
    },
)
