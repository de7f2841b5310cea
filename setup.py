"""
Setup script for mtxread

Pure-Python package laid out under src/. The version is read from
src/mtxread/__init__.py so it is defined in one place.
"""

from pathlib import Path
from setuptools import setup, find_packages


# Read version from src/mtxread/__init__.py
def get_version():
    version_file = Path("src/mtxread/__init__.py")
    if version_file.exists():
        for line in version_file.read_text().splitlines():
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.1.0"


# Read long description from README
def get_long_description():
    readme = Path("README.md")
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    name="mtxread",
    version=get_version(),
    description="MatrixMarket coordinate reader producing CSR/CSC matrices",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "scipy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "mtxread=mtxread.cli:main",
        ],
    },
    zip_safe=True,
)
