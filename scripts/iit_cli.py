#!/usr/bin/env python3
"""
IIT network CLI

Usage modes:
- Default run: load a bundled dataset or YAML network, render it and print the drawing as JSON
- Image: write the rendered panel to PNG with matplotlib
- Validation: check node positions and connection references, print summary
- Stats: component structure and validation counts
- Export: write GraphML for external tools
- Utility: list bundled datasets and sample YAML networks, show version
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from glob import glob
from pathlib import Path
from typing import Any, Dict, List

import yaml

from iit_core.compiler import compile_from_file  # type: ignore
from iit_core.config import RenderStyle  # type: ignore
from iit_core.datasets import dataset_names, get_dataset  # type: ignore
from iit_core.graph import Network  # type: ignore
from iit_core.renderer import render  # type: ignore


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Render IIT illustration networks and dump drawings/metrics",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Utilities / meta
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("-v", "--verbose", action="count", default=0, help="Increase verbosity (-v, -vv)")
    p.add_argument("--list-datasets", action="store_true", help="List bundled datasets and sample YAML networks and exit")

    # Primary input
    p.add_argument("dataset", nargs="?", help="Bundled dataset name (see --list-datasets)")
    p.add_argument("--yaml", type=str, default="", help="Path to a YAML network (e.g., scripts/networks/cerebellum.yaml)")

    # Surface and style
    p.add_argument("--width", type=float, default=300.0, help="Surface width")
    p.add_argument("--height", type=float, default=300.0, help="Surface height")
    p.add_argument("--rectangular", action="store_true", help="Scale x by width and y by height independently")
    p.add_argument("--color", type=str, default=None, help="Draw color")
    p.add_argument("--title", type=str, default=None, help="Panel title")
    p.add_argument("--node-radius", type=float, default=None, help="Node disk radius")
    p.add_argument("--edge-opacity", type=float, default=None, help="Connection opacity")

    # Output
    p.add_argument("--out", type=str, default="", help="Optional output JSON file path")
    p.add_argument("--png", type=str, default="", help="Optional PNG image path")

    # Analysis / export
    p.add_argument("--validate", action="store_true", help="Run network validation")
    p.add_argument("--stats", action="store_true", help="Print network statistics")
    p.add_argument("--export-graphml", type=str, default="", help="Export network to GraphML at given path")

    return p.parse_args(argv)


def build_style(args: argparse.Namespace) -> RenderStyle:
    overrides: Dict[str, Any] = {}
    if args.color is not None:
        overrides["color"] = args.color
    if args.title is not None:
        overrides["title"] = args.title
    if args.node_radius is not None:
        overrides["node_radius"] = float(args.node_radius)
    if args.edge_opacity is not None:
        overrides["edge_opacity"] = float(args.edge_opacity)
    return RenderStyle(**overrides)


def setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def find_sample_networks() -> List[str]:
    here = Path(__file__).resolve()
    return sorted(glob(str(here.parent / "networks" / "*.yaml")))


def load_network(args: argparse.Namespace) -> Network:
    if args.yaml:
        logging.info("Compiling network from %s", args.yaml)
        return compile_from_file(args.yaml)
    logging.info("Loading bundled dataset %s", args.dataset)
    return get_dataset(args.dataset)


def write_png(network: Network, style: RenderStyle, surface, path: str) -> None:
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from viz.utils import network_figure  # type: ignore

    fig = network_figure(network, style, surface=surface)
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)


def main(argv: List[str] | None = None) -> int:
    from iit_core import __version__ as iit_version  # type: ignore

    args = parse_args(argv)
    setup_logging(args.verbose)

    if args.version:
        print(iit_version)
        return 0

    if args.list_datasets:
        print(json.dumps({"datasets": dataset_names(), "yaml": find_sample_networks()}, indent=2))
        return 0

    if not args.dataset and not args.yaml:
        print("error: missing dataset name or --yaml path (try --list-datasets)", file=sys.stderr)
        return 2

    try:
        network = load_network(args)
    except KeyError as exc:
        print(f"error: {exc.args[0]}", file=sys.stderr)
        return 2
    except (ValueError, yaml.YAMLError, OSError) as exc:
        print(f"error: could not load network: {exc}", file=sys.stderr)
        return 2

    try:
        style = build_style(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.validate or args.stats:
        results = network.validate_all()
        summary = network.get_validation_summary(results)
        logging.info("Validation issues: %d (errors=%d warnings=%d)", summary["total_issues"], summary["errors"], summary["warnings"])
        if args.validate and not args.stats:
            print(json.dumps({"summary": summary, "results": results}, indent=2))
            return 1 if summary["errors"] > 0 else 0

    if args.stats:
        print(json.dumps(network.get_graph_statistics(), indent=2))

    if args.export_graphml:
        logging.info("Exporting GraphML to %s", args.export_graphml)
        network.export_graphml(args.export_graphml)

    # Stats already own stdout; only render when an output file was asked for
    if args.stats and not (args.png or args.out):
        return 0

    surface = (args.width, args.height)

    if args.png:
        logging.info("Writing PNG to %s", args.png)
        write_png(network, style, surface, args.png)

    drawing = render(network, surface, style, rectangular=args.rectangular)
    payload: Dict[str, Any] = {"network": network.name, **drawing.to_dict()}

    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
    elif not args.stats:
        print(json.dumps(payload, indent=2))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
