#!/usr/bin/env python3

"""Setup script for the VSEPR molecular geometry package."""

from setuptools import setup, find_packages

setup(
    name="vsepr-geometry",
    version="0.1.0",
    description="VSEPR geometry classification and orbital placement for small molecules",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "numpy>=1.20.0",
        "scipy>=1.7.0",
        "networkx>=2.6.0",
        "pandas>=1.3.0",
        "rdkit>=2022.3.1",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "test": [
            "pytest>=6.0",
        ]
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "vsepr-geometry=vsepr.presentation.cli.compute_geometry:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Chemistry",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
