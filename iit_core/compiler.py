"""
YAML network compiler.

Compiles a small YAML description into a `Network`, so that illustrations
beyond the bundled datasets can be drawn without editing code.

YAML schema (minimal):

name: thalamocortical
nodes:
  - id: 1
    pos: [0.2, 0.2]
    label: A
  - id: 2
    pos: [0.8, 0.1]
edges:
  - [1, 2]                         # shorthand: source, target
  - {source: 2, target: 1, id: back}

Notes:
- Ill-formed node entries (missing id or pos, non-numeric values, ids that
  are booleans or non-integral numbers) and
  ill-formed edge entries are skipped.
- Edges may reference ids that are not declared; they are kept and then
  ignored when drawn.
- Duplicate node ids raise ValueError from `Network`.
- A document whose top level is not a mapping raises ValueError.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import yaml

from .graph import NeuralConnection, NeuralNode, Network

logger = logging.getLogger(__name__)


def _as_id(value: Any) -> int:
    """Strict integer conversion for node ids: no booleans, no truncated floats."""
    if isinstance(value, bool):
        raise TypeError(f"boolean id {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"non-integral id {value!r}")
    return int(value)


def _parse_node(entry: Any) -> Optional[NeuralNode]:
    if not isinstance(entry, dict):
        return None
    pos = entry.get("pos", entry.get("position"))
    if entry.get("id") is None or not isinstance(pos, (list, tuple)) or len(pos) != 2:
        return None
    try:
        return NeuralNode(_as_id(entry["id"]), (float(pos[0]), float(pos[1])), str(entry.get("label", "")))
    except (TypeError, ValueError):
        return None


def _parse_edge(entry: Any) -> Optional[NeuralConnection]:
    try:
        if isinstance(entry, (list, tuple)) and len(entry) == 2:
            return NeuralConnection(_as_id(entry[0]), _as_id(entry[1]))
        if isinstance(entry, dict) and "source" in entry and "target" in entry:
            eid = entry.get("id")
            return NeuralConnection(_as_id(entry["source"]), _as_id(entry["target"]), id=str(eid) if eid is not None else None)
    except (TypeError, ValueError):
        return None
    return None


def compile_from_dict(spec: Dict[str, Any]) -> Network:
    """
    Compile a YAML-parsed dictionary into a `Network`.

    Args:
        spec: Parsed YAML dictionary

    Returns:
        Network: The compiled network

    Raises:
        ValueError: If `spec` is not a mapping or declares a node id twice
    """
    if not isinstance(spec, dict):
        raise ValueError(f"top-level YAML must be a mapping, got {type(spec).__name__}")
    nodes: List[NeuralNode] = []
    for entry in spec.get("nodes", []) or []:
        node = _parse_node(entry)
        if node is None:
            logger.debug("Skipping ill-formed node entry: %r", entry)
            continue
        nodes.append(node)

    edges: List[NeuralConnection] = []
    for entry in spec.get("edges", []) or []:
        edge = _parse_edge(entry)
        if edge is None:
            logger.debug("Skipping ill-formed edge entry: %r", entry)
            continue
        edges.append(edge)

    return Network(nodes=nodes, edges=edges, name=str(spec.get("name", "")))


def compile_from_yaml(yaml_text: str) -> Network:
    """Compile from YAML text into a `Network`."""
    data = yaml.safe_load(yaml_text)
    if data is None:
        data = {}
    return compile_from_dict(data)


def compile_from_file(path: str) -> Network:
    """Compile from a YAML file path into a `Network`."""
    logger.debug("Compiling network from %s", path)
    with open(path, "r", encoding="utf-8") as f:
        txt = f.read()
    return compile_from_yaml(txt)


def network_to_dict(network: Network) -> Dict[str, Any]:
    """Inverse of `compile_from_dict`, suitable for `yaml.safe_dump`."""
    return {
        "name": network.name,
        "nodes": [{"id": n.id, "pos": [n.position[0], n.position[1]], "label": n.label} for n in network.nodes],
        "edges": [{"source": e.source, "target": e.target, "id": e.id} for e in network.edges],
    }
