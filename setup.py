#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
ASMplot: k-mer spectra plots of reads against genome assemblies

Builds any missing FastK k-mer tables for one or two assemblies, hands the
reads and assembly tables to the plotting engine and removes the tables it
built afterwards.

Version: 0.1
License: See README.md
"""

from setuptools import setup, find_packages
import os
import sys

# Ensure we can import version
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "asmplot"))

from version import __version__

# Read long description from README
with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

# Read requirements from requirements.txt
def read_requirements(filename):
    """Read requirements from file."""
    filepath = os.path.join(os.path.dirname(__file__), filename)
    if not os.path.exists(filepath):
        return []
    with open(filepath, "r") as f:
        return [line.strip() for line in f if line.strip() and not line.startswith("#")]

install_requires = read_requirements("requirements.txt")

extras_require = {
    "dev": read_requirements("requirements-dev.txt"),
}

setup(
    name="asmplot",
    version=__version__,
    author="ASMplot Development Team",
    description="K-mer spectra plots of sequencing reads against one or two assemblies",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: POSIX",
    ],
    python_requires=">=3.9",
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "asmplot=asmplot.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
    keywords="k-mer spectra assembly FastK bioinformatics",
)
