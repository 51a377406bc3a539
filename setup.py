"""
setup.py

Packaging metadata and CLI entry point for readme-check.

Version: 1.0.0 - Validates module READMEs before publication: required
headers, Resources/Inputs/Outputs tables, and link reachability with
registry-aware verification.
"""
from setuptools import setup, find_packages

setup(
    name="readme-check",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click",
        "requests",
        "pydantic>=2.0",
        "pyyaml",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "readme-check=cli:cli",
        ],
    },
    python_requires=">=3.8",
)
