"""
Graph data structures for the neural network illustrations.

This module defines the data model drawn by the renderer:
- NeuralNode: A group of neurons with a normalized position and a label
- NeuralConnection: A directed connection between two nodes
- Network: Immutable container of nodes and connections with analysis helpers
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

import networkx as nx

from .geometry import Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NeuralNode:
    """
    A single element of a neural network model, such as a group of neurons.

    Attributes:
        id: Identifier, unique within a network; edges reference it
        position: Normalized (x, y) position in [0, 1], origin top-left
        label: Short display string, not required to be unique
    """

    id: int
    """Identity key used to resolve connection endpoints."""

    position: Point
    """Normalized (x, y) coordinates; y grows downwards."""

    label: str = ""
    """Cosmetic label; the renderer does not draw it."""

    def __post_init__(self):
        object.__setattr__(self, "position", (float(self.position[0]), float(self.position[1])))


@dataclass(frozen=True)
class NeuralConnection:
    """
    A directed connection between two `NeuralNode` instances.

    Attributes:
        source: Id of the node where the connection originates
        target: Id of the node where the connection terminates
        id: Opaque identifier; defaults to "<source>-><target>"
    """

    source: int
    target: int
    id: Optional[str] = None

    def __post_init__(self):
        if self.id is None:
            object.__setattr__(self, "id", f"{self.source}->{self.target}")


@dataclass(frozen=True)
class Network:
    """
    An immutable illustrative architecture: a set of nodes and connections.

    Connections may reference node ids that are not present; such dangling
    connections are kept as data and simply ignored by drawing and analysis.

    Attributes:
        nodes: Nodes in insertion order (ids must be unique)
        edges: Directed connections in insertion order
        name: Optional dataset name
    """

    nodes: Tuple[NeuralNode, ...] = ()
    edges: Tuple[NeuralConnection, ...] = ()
    name: str = ""
    _index: Dict[int, NeuralNode] = field(default=None, init=False, repr=False, compare=False)  # type: ignore[assignment]

    def __post_init__(self):
        object.__setattr__(self, "nodes", tuple(self.nodes))
        object.__setattr__(self, "edges", tuple(self.edges))
        index: Dict[int, NeuralNode] = {}
        for node in self.nodes:
            if node.id in index:
                raise ValueError(f"Duplicate node id {node.id} in network '{self.name}'")
            index[node.id] = node
        object.__setattr__(self, "_index", index)

    # ----- lookup -----
    def node(self, node_id: int) -> Optional[NeuralNode]:
        """Return the node with `node_id`, or None if it is not in the network."""
        return self._index.get(node_id)

    def resolve(self, edge: NeuralConnection) -> Optional[Tuple[NeuralNode, NeuralNode]]:
        """
        Resolve both endpoints of a connection.

        Returns:
            (source_node, target_node), or None if either endpoint is missing
        """
        src = self._index.get(edge.source)
        dst = self._index.get(edge.target)
        if src is None or dst is None:
            return None
        return src, dst

    def resolved_edges(self) -> List[Tuple[NeuralConnection, NeuralNode, NeuralNode]]:
        """Connections whose endpoints both resolve, in insertion order."""
        resolved = []
        for edge in self.edges:
            ends = self.resolve(edge)
            if ends is not None:
                resolved.append((edge, ends[0], ends[1]))
        return resolved

    def dangling_edges(self) -> List[NeuralConnection]:
        return [e for e in self.edges if self.resolve(e) is None]

    # ----- derivations -----
    def subnetwork(self, node_ids: Iterable[int], name: str = "") -> "Network":
        """
        Return the induced sub-network on `node_ids`.

        Only connections with both endpoints inside the subset are kept.
        """
        keep = set(node_ids)
        nodes = [n for n in self.nodes if n.id in keep]
        edges = [e for e in self.edges if e.source in keep and e.target in keep]
        return Network(nodes=nodes, edges=edges, name=name or self.name)

    def without_edges(self, edge_ids: Iterable[str], name: str = "") -> "Network":
        """Return a copy of the network with the given connection ids removed."""
        drop = set(edge_ids)
        edges = [e for e in self.edges if e.id not in drop]
        return Network(nodes=self.nodes, edges=edges, name=name or self.name)

    # ----- networkx bridge -----
    def to_networkx(self) -> nx.DiGraph:
        """
        Convert the network to a NetworkX DiGraph for analysis and export.

        Dangling connections are left out so that NetworkX does not invent
        nodes for missing endpoints.

        Returns:
            DiGraph with node attributes (label, x, y) and edge attribute id
        """
        G = nx.DiGraph(name=self.name)
        for node in self.nodes:
            G.add_node(node.id, label=node.label, x=node.position[0], y=node.position[1])
        for edge, src, dst in self.resolved_edges():
            G.add_edge(src.id, dst.id, id=edge.id)
        return G

    def export_graphml(self, filepath: str) -> None:
        """
        Export the network to GraphML.

        Args:
            filepath: Path where to save the GraphML file
        """
        logger.debug("Writing GraphML for '%s' to %s", self.name, filepath)
        nx.write_graphml(self.to_networkx(), filepath)

    def connected_components(self) -> List[List[int]]:
        """
        Find connected components, ignoring connection direction.

        Returns:
            Sorted node-id lists, ordered by their smallest id
        """
        G = self.to_networkx()
        components = [sorted(c) for c in nx.weakly_connected_components(G)]
        return sorted(components, key=lambda c: c[0])

    def is_connected(self) -> bool:
        """True when every node can reach every other node (direction ignored)."""
        if not self.nodes:
            return False
        return len(self.connected_components()) == 1

    # ----- validation -----
    def validate_positions(self) -> Dict[str, List[str]]:
        """Report nodes whose normalized coordinates fall outside [0, 1]."""
        issues = {"position_warnings": []}
        for node in self.nodes:
            x, y = node.position
            if not (0.0 <= x <= 1.0 and 0.0 <= y <= 1.0):
                issues["position_warnings"].append(
                    f"Node {node.id} position ({x}, {y}) is outside the normalized range [0.0, 1.0]"
                )
        return {k: v for k, v in issues.items() if v}

    def validate_edges(self) -> Dict[str, List[str]]:
        """
        Validate connection references and identifiers.

        Checks:
        - Endpoints that do not resolve (warning: they are skipped when drawn)
        - Duplicate connection ids (error)
        - Self connections (warning)
        """
        issues = {
            "dangling_edge_warnings": [],
            "duplicate_edge_errors": [],
            "self_loop_warnings": [],
        }

        seen = set()
        for edge in self.edges:
            if edge.id in seen:
                issues["duplicate_edge_errors"].append(f"Connection id '{edge.id}' is used more than once")
            seen.add(edge.id)

            missing = [nid for nid in (edge.source, edge.target) if nid not in self._index]
            if missing:
                issues["dangling_edge_warnings"].append(
                    f"Connection '{edge.id}' references missing node(s) {missing}"
                )
            if edge.source == edge.target:
                issues["self_loop_warnings"].append(f"Connection '{edge.id}' connects node {edge.source} to itself")

        return {k: v for k, v in issues.items() if v}

    def validate_connectivity(self) -> Dict[str, List[str]]:
        """Report isolated nodes and the number of disconnected components."""
        issues = {"isolated_node_warnings": [], "connectivity_info": []}
        G = self.to_networkx()
        for node_id in sorted(nx.isolates(G)):
            issues["isolated_node_warnings"].append(f"Node {node_id} has no connections")
        components = self.connected_components()
        if len(components) > 1:
            issues["connectivity_info"].append(f"Network has {len(components)} disconnected components")
        return {k: v for k, v in issues.items() if v}

    def validate_all(self) -> Dict[str, Dict[str, List[str]]]:
        """
        Run every validation check.

        Returns:
            Dictionary organized by validation category, each containing issues
        """
        results = {}
        position_issues = self.validate_positions()
        if position_issues:
            results["positions"] = position_issues
        edge_issues = self.validate_edges()
        if edge_issues:
            results["edges"] = edge_issues
        connectivity_issues = self.validate_connectivity()
        if connectivity_issues:
            results["connectivity"] = connectivity_issues
        return results

    @staticmethod
    def get_validation_summary(validation_results: Dict[str, Dict[str, List[str]]]) -> Dict[str, int]:
        """
        Count issues by severity.

        Issue lists whose key contains "error" count as errors, "warning" as
        warnings; anything else only counts towards the total.
        """
        category_totals = [sum(len(v) for v in issues.values()) for issues in validation_results.values()]
        return {
            "total_issues": sum(category_totals),
            "errors": sum(len(v) for issues in validation_results.values() for k, v in issues.items() if "error" in k),
            "warnings": sum(len(v) for issues in validation_results.values() for k, v in issues.items() if "warning" in k and "error" not in k),
            "categories_with_issues": sum(1 for total in category_totals if total > 0),
        }

    def is_valid(self) -> bool:
        """A network is valid when validation finds no errors."""
        return self.get_validation_summary(self.validate_all())["errors"] == 0

    def get_graph_statistics(self) -> Dict[str, Any]:
        """
        Summary statistics for monitoring and the CLI.

        Returns:
            Dictionary with counts, component structure and validation summary
        """
        G = self.to_networkx()
        components = self.connected_components()
        return {
            "name": self.name,
            "nodes": len(self.nodes),
            "edges": len(self.edges),
            "drawn_edges": G.number_of_edges(),
            "components": len(components),
            "component_sizes": [len(c) for c in components],
            "density": float(nx.density(G)) if len(self.nodes) > 1 else 0.0,
            "validation_summary": self.get_validation_summary(self.validate_all()),
        }
