"""Setuptools build hooks for vecsub."""

from __future__ import annotations

from setuptools import setup

# Project metadata and dependencies are declared in pyproject.toml.
setup()
