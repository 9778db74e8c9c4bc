import sys
from setuptools import setup, find_packages

# Check for minimum Python version if necessary
if sys.version_info < (3, 8):
    sys.exit("Sorry, Python >= 3.8 is required for ndtensor.")

# Read README for long description
try:
    with open("README.md", encoding="utf-8") as f:
        long_description = f.read()
except FileNotFoundError:
    long_description = "ndtensor: a fixed-rank dense tensor container. (README not found)"


setup(
    name="ndtensor",
    version="0.1.0", # Keep in sync with ndtensor.__version__ fallback
    description="A fixed-rank, dense, row-major tensor container with elementwise addition",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    # Pure Python package; the tests ship inside it as `ndtensor.tests`
    packages=find_packages(include=["ndtensor", "ndtensor.*"]),
    # numpy provides the contiguous element buffer and the scalar types
    install_requires=["numpy>=1.21"],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.8",
)
