# setup.py - Build the bitspectrum package
from setuptools import setup, find_packages

setup(
    name="bitspectrum",
    version="0.1.0",
    description="Fixed-length bit vectors with controlled Hamming weight",
    packages=find_packages(include=["bitspectrum", "bitspectrum.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.25",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
