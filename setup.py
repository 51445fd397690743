#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import find_packages, setup

setup(
    name="cutlocus",
    version="0.1.0",
    description="Cut-locus engine: open closed triangle meshes into topological disks",
    author="",
    author_email="",
    url="",
    packages=find_packages(),
    include_package_data=True,
    install_requires=[
        # Core dependencies (cut search, cut graph, topology checks)
        "numpy",
        "networkx",
        "scipy>=1.10.0",
        # Mesh file loading
        "libigl>=2.5.0",
        "nibabel>=5.0.0",
        # Visualization
        "matplotlib>=3.7.0",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
            "codecov",
        ],
    },
    entry_points={
        "console_scripts": [
            "cutlocus=cutlocus.cli:main",
        ],
    },
    python_requires=">=3.10",
)
