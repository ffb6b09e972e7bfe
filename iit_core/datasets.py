"""
Illustrative network fixtures.

The positions are hand-placed, not computed: each dataset exists to make one
point about integration visually obvious.

- thalamocortical: specialized regions with widespread, long-range
  integration; one large connected complex (high Φ)
- cerebellum: three parallel modules, each a closed triangle, with no links
  between them; three small isolated complexes (low Φ)
- split_brain: two hemispheres joined (or not) by corpus callosum fibers
- dynamic_core: a main complex plus informationally insulated ports
"""

from __future__ import annotations

from typing import Callable, Dict, List, Tuple

from .graph import NeuralConnection, NeuralNode, Network


def thalamocortical() -> Network:
    nodes = [
        NeuralNode(1, (0.2, 0.2), "A"),
        NeuralNode(2, (0.8, 0.1), "B"),
        NeuralNode(3, (0.5, 0.5), "C"),
        NeuralNode(4, (0.2, 0.8), "D"),
        NeuralNode(5, (0.9, 0.9), "E"),
        NeuralNode(6, (0.6, 0.2), "F"),
    ]
    edges = [
        NeuralConnection(1, 3), NeuralConnection(1, 4),
        NeuralConnection(2, 3), NeuralConnection(2, 5),
        NeuralConnection(3, 4), NeuralConnection(3, 6),
        NeuralConnection(4, 5), NeuralConnection(1, 6),
        # Long-range integration
        NeuralConnection(2, 1), NeuralConnection(4, 2),
    ]
    return Network(nodes=nodes, edges=edges, name="thalamocortical")


def cerebellum() -> Network:
    nodes = [
        # Module 1
        NeuralNode(1, (0.2, 0.2), "A1"),
        NeuralNode(2, (0.1, 0.4), "A2"),
        NeuralNode(3, (0.3, 0.3), "A3"),
        # Module 2
        NeuralNode(4, (0.8, 0.2), "B1"),
        NeuralNode(5, (0.9, 0.4), "B2"),
        NeuralNode(6, (0.7, 0.3), "B3"),
        # Module 3
        NeuralNode(7, (0.5, 0.8), "C1"),
        NeuralNode(8, (0.4, 0.9), "C2"),
        NeuralNode(9, (0.6, 0.9), "C3"),
    ]
    edges = [
        NeuralConnection(1, 2), NeuralConnection(2, 3), NeuralConnection(3, 1),
        NeuralConnection(4, 5), NeuralConnection(5, 6), NeuralConnection(6, 4),
        NeuralConnection(7, 8), NeuralConnection(8, 9), NeuralConnection(9, 7),
        # No connections between modules: informational insulation
    ]
    return Network(nodes=nodes, edges=edges, name="cerebellum")


LEFT_HEMISPHERE = (1, 2, 3, 4)
RIGHT_HEMISPHERE = (5, 6, 7, 8)
CALLOSAL_EDGE_IDS = ("cc-1", "cc-2", "cc-3")


def split_brain(severed: bool = False) -> Network:
    """
    Two hemispheres, optionally joined by the corpus callosum.

    Args:
        severed: When True the callosal connections are cut, leaving two
            independent complexes.
    """
    nodes = [
        NeuralNode(1, (0.10, 0.30), "L1"),
        NeuralNode(2, (0.35, 0.20), "L2"),
        NeuralNode(3, (0.35, 0.75), "L3"),
        NeuralNode(4, (0.10, 0.70), "L4"),
        NeuralNode(5, (0.65, 0.20), "R1"),
        NeuralNode(6, (0.90, 0.30), "R2"),
        NeuralNode(7, (0.90, 0.70), "R3"),
        NeuralNode(8, (0.65, 0.75), "R4"),
    ]
    edges = [
        NeuralConnection(1, 2), NeuralConnection(2, 3), NeuralConnection(3, 4),
        NeuralConnection(4, 1), NeuralConnection(1, 3),
        NeuralConnection(5, 6), NeuralConnection(6, 7), NeuralConnection(7, 8),
        NeuralConnection(8, 5), NeuralConnection(6, 8),
        # Corpus callosum
        NeuralConnection(2, 5, id=CALLOSAL_EDGE_IDS[0]),
        NeuralConnection(3, 8, id=CALLOSAL_EDGE_IDS[1]),
        NeuralConnection(8, 3, id=CALLOSAL_EDGE_IDS[2]),
    ]
    intact = Network(nodes=nodes, edges=edges, name="split_brain_intact")
    if severed:
        return intact.without_edges(CALLOSAL_EDGE_IDS, name="split_brain_severed")
    return intact


def split_brain_hemispheres() -> Tuple[Network, Network]:
    """The severed brain as two independent sub-networks (left, right)."""
    whole = split_brain(severed=True)
    return (
        whole.subnetwork(LEFT_HEMISPHERE, name="left_hemisphere"),
        whole.subnetwork(RIGHT_HEMISPHERE, name="right_hemisphere"),
    )


CORE_NODES = (1, 2, 3)
PORT_NODES = (4, 5, 6, 7)


def dynamic_core() -> Network:
    """
    The main complex (nodes 1-3, reciprocally linked) with insulated ports.

    Ports only touch the core through one-way links: the retina feeds in,
    motor efferents read out, and the subcortical loop runs on its own.
    """
    nodes = [
        NeuralNode(1, (0.38, 0.30), "Core 1"),
        NeuralNode(2, (0.62, 0.45), "Core 2"),
        NeuralNode(3, (0.50, 0.62), "Core 3"),
        NeuralNode(4, (0.08, 0.15), "Retina"),
        NeuralNode(5, (0.92, 0.80), "Motor"),
        NeuralNode(6, (0.40, 0.92), "Loop in"),
        NeuralNode(7, (0.60, 0.92), "Loop out"),
    ]
    edges = [
        NeuralConnection(1, 2), NeuralConnection(2, 1),
        NeuralConnection(2, 3), NeuralConnection(3, 2),
        NeuralConnection(3, 1), NeuralConnection(1, 3),
        # Ports-in and ports-out
        NeuralConnection(4, 1, id="afferent"),
        NeuralConnection(2, 5, id="efferent"),
        NeuralConnection(6, 7, id="loop-1"),
        NeuralConnection(7, 6, id="loop-2"),
    ]
    return Network(nodes=nodes, edges=edges, name="dynamic_core")


DATASETS: Dict[str, Callable[[], Network]] = {
    "thalamocortical": thalamocortical,
    "cerebellum": cerebellum,
    "split_brain_intact": lambda: split_brain(severed=False),
    "split_brain_severed": lambda: split_brain(severed=True),
    "dynamic_core": dynamic_core,
}


def dataset_names() -> List[str]:
    return sorted(DATASETS)


def get_dataset(name: str) -> Network:
    """
    Look up a named dataset.

    Raises:
        KeyError: If `name` is not a known dataset
    """
    factory = DATASETS.get(name)
    if factory is None:
        raise KeyError(f"Unknown dataset '{name}'. Known datasets: {', '.join(dataset_names())}")
    return factory()
