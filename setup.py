#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="unitypackage-extractor",
    version="1.0.0",
    description="Extract .unitypackage archives into their original folder structure",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.12",
    extras_require={
        'test': ['pytest>=7'],
    },
    entry_points={
        'console_scripts': [
            'unitypackage-extractor=unitypackage_extractor.cli:main',
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: System :: Archiving",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
)
