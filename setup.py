from pathlib import Path
from setuptools import find_packages, setup

HERE = Path(__file__).parent


def _read_version() -> str:
    """Read __version__ from the package without importing it."""
    init = HERE / "src" / "smartquotify" / "__init__.py"
    for line in init.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ not found in src/smartquotify/__init__.py")


setup(
    name="smartquotify",
    version=_read_version(),
    description="Straight-to-smart quote conversion with markup-aware protection",
    author="smartquotify contributors",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["smartquotify=smartquotify.cli:main"]},
)
