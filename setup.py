# setup.py
from setuptools import setup, find_packages


def read_version():
    """Return __version__ from the package without importing it."""
    with open("src/charngram/__init__.py", encoding="utf-8") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=", 1)[1].strip().strip('"').strip("'")
    raise RuntimeError("__version__ not found")


setup(
    name="charngram",
    version=read_version(),
    description="Count character n-gram frequencies in a text stream",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "tqdm>=4.60",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "charngram = charngram.cli:main",
        ],
    },
)
