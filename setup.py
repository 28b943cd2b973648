#!/usr/bin/env python3
"""
Setup script for monit_status.
Installs the status document renderer and its HTTP adapter.
"""

from setuptools import setup, find_packages

# Most configuration is in pyproject.toml
# This file exists for compatibility with older pip versions

setup(
    packages=find_packages(include=["monit_status", "monit_status.*"]),
)
