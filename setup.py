#!/usr/bin/env python
"""
Setup script for Hive Feed Setup
"""
import re
from pathlib import Path

from setuptools import setup, find_packages

# Read the README file
this_directory = Path(__file__).parent
readme = this_directory / "README.md"
long_description = readme.read_text(encoding="utf-8") if readme.exists() else ""

# Read version from the package
version_file = this_directory / "src" / "hive_feed_setup" / "_version.py"
version = re.search(
    r'^__version__ = "([^"]+)"', version_file.read_text(encoding="utf-8"), re.MULTILINE
).group(1)


setup(
    name="hive-feed-setup",
    version=version,
    author="Hive Feed Price contributors",
    description="Interactive configuration wizard for the Hive witness feed-price bot",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Utilities",
    ],
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.6.0",
        "loguru>=0.7.2",
        "click>=8.1.0",
        "rich>=13.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.4.0",
            "pytest-cov>=5.0.0",
            "mypy>=1.8.0",
            "black>=22.0.0",
            "ruff>=0.12.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "hive-feed-setup=hive_feed_setup.cli:main",
        ],
    },
)
