"""
Visualization Package.

This package provides the presentation layer for the IIT illustrations: a
Streamlit page and the matplotlib helpers it uses to draw the architecture
panels, the dynamic core schematic and the split-brain toggle.
"""

# Visualization Package
