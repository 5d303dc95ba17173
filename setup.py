#!/usr/bin/env python3
"""Setup script for the PyMuPDF glyph-clustering table stripper."""

from setuptools import find_packages, setup

setup(
    name="pymupdf-tablestripper",
    version="1.0.0",
    description="Infer table rows and columns from glyph bounding boxes with PyMuPDF",
    packages=find_packages(include=["pymupdf_tablestripper", "pymupdf_tablestripper.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pymupdf>=1.24",
        "numpy>=1.24",
        "numba>=0.59",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "pymupdf-tablestripper=pymupdf_tablestripper.main:main",
        ],
    },
)
