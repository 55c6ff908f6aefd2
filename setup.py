#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Setup script for AzkabanTool
"""

from setuptools import setup, find_packages

# Read the README file
def read_readme():
    with open("README.md", "r", encoding="utf-8") as f:
        return f.read()

# Get version from version.py
def get_version():
    """Extract version from the package version module"""
    try:
        with open("src/azkabantool/version.py", "r") as f:
            for line in f:
                if line.startswith("__version__"):
                    return line.split("=")[1].strip().strip('"\'')
    except FileNotFoundError:
        pass
    return "0.1.0"

# Main setup configuration
setup(
    name="AzkabanTool",
    version=get_version(),
    author="suchunsv",
    author_email="suchunsv@outlook.com",
    description="Scaffold, package and run Azkaban job collections",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"azkabantool": ["templates/*/*"]},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Distributed Computing",
        "Topic :: System :: Systems Administration",
    ],
    python_requires=">=3.8",
    install_requires=[
        "typer>=0.9.0,<0.26",
        "click>=8.0",
        "rich>=12.0",
        "loguru>=0.6.0",
        "pyyaml>=5.4.0",
        "dacite>=1.7.0",
        "requests>=2.25",
    ],
    extras_require={
        "test": [
            "pytest>=6.0",
        ],
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "black>=21.0",
            "flake8>=3.8",
            "mypy>=0.812",
        ],
    },
    entry_points={
        "console_scripts": [
            "azkabantool=azkabantool.cli:main",
            "azkaban-tool=azkabantool.cli:main",
            "azt=azkabantool.cli:main",
        ],
    },
    keywords="azkaban scheduler workflow scaffold hive sqoop",
    include_package_data=True,
    zip_safe=False,
)
