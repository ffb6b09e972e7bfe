"""
Tests Package.

This package contains test suites for the IIT illustration code, including
unit tests for geometry scaling, the network data model and datasets, the
renderer, the YAML compiler, and the matplotlib/Manim/CLI front ends.
"""

# Tests Package
