"""Setup script for tinytensor package."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="tinytensor",
    version="0.1.0",
    author="tinytensor contributors",
    description="A minimal immutable N-dimensional array value type with validated shapes and nested display",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering",
    ],
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "torch": ["torch"],
        "numpy": ["numpy"],
        "all": ["torch", "numpy"],
        "dev": ["pytest", "pytest-cov"],
    },
    keywords="tensor ndarray shape strides numpy pytorch",
)
