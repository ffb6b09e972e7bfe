"""
IIT Core Package.

This package contains the data model and renderer behind the Integrated
Information Theory (IIT) illustrations, including:

- Geometry scaling from normalized to surface coordinates
- Core data structures (NeuralNode, NeuralConnection, Network)
- The bundled illustrative datasets
- The pure network graph renderer
- A YAML compiler for custom networks
"""

# IIT Core Package

__version__ = "0.1.0"

from .geometry import scale, fit_square
from .graph import NeuralNode, NeuralConnection, Network
from .config import RenderStyle
from .renderer import Drawing, Segment, Disk, render
from .datasets import (
    thalamocortical,
    cerebellum,
    split_brain,
    split_brain_hemispheres,
    dynamic_core,
    get_dataset,
    dataset_names,
)
from .compiler import compile_from_yaml, compile_from_file, compile_from_dict
