"""
IIT + Manim integration package.

This package provides:
- Conversion of renderer drawings to Manim scene coordinates
- Mobject builders for segments and node disks
- Scenes for the architecture comparison and the split-brain cut
"""

__all__ = [
    # Subpackages will be imported lazily by users
]
