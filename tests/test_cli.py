"""
Tests for the scripts/iit_cli.py command line entry point.
"""

import json
import os
import sys

import networkx as nx
import pytest


def _ensure_scripts_on_path():
    repo_root = os.path.dirname(os.path.dirname(__file__))
    scripts_dir = os.path.join(repo_root, "scripts")
    if scripts_dir not in sys.path:
        sys.path.insert(0, scripts_dir)


@pytest.fixture
def cli():
    _ensure_scripts_on_path()
    import iit_cli  # Import added to path by _ensure_scripts_on_path()

    return iit_cli


class TestCliBasics:
    def test_version(self, cli, capsys):
        from iit_core import __version__

        assert cli.main(["--version"]) == 0
        assert capsys.readouterr().out.strip() == __version__

    def test_list_datasets(self, cli, capsys):
        assert cli.main(["--list-datasets"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert "thalamocortical" in data["datasets"]
        assert any(p.endswith("cerebellum.yaml") for p in data["yaml"])

    def test_missing_input(self, cli, capsys):
        assert cli.main([]) == 2
        assert "missing dataset" in capsys.readouterr().err

    def test_unknown_dataset(self, cli, capsys):
        assert cli.main(["hippocampus"]) == 2
        assert "Unknown dataset" in capsys.readouterr().err

    def test_edge_opacity_not_below_nodes_exits_2(self, cli, capsys):
        assert cli.main(["cerebellum", "--edge-opacity", "1.0"]) == 2
        captured = capsys.readouterr()
        assert "edge_opacity" in captured.err
        assert captured.out == ""

    @pytest.mark.parametrize(
        "text",
        [
            "- {id: 1, pos: [0, 0]}\n",
            "nodes: [unclosed\n",
            "nodes:\n  - {id: 1, pos: [0, 0]}\n  - {id: 1, pos: [1, 1]}\n",
        ],
        ids=["non-mapping", "malformed", "duplicate-node-ids"],
    )
    def test_bad_yaml_exits_2(self, cli, tmp_path, capsys, text):
        yaml_path = tmp_path / "bad.yaml"
        yaml_path.write_text(text)
        assert cli.main(["--yaml", str(yaml_path)]) == 2
        assert "could not load network" in capsys.readouterr().err

    def test_missing_yaml_file_exits_2(self, cli, tmp_path, capsys):
        assert cli.main(["--yaml", str(tmp_path / "absent.yaml")]) == 2
        assert "could not load network" in capsys.readouterr().err


class TestCliRender:
    def test_render_dataset_to_stdout(self, cli, capsys):
        assert cli.main(["cerebellum", "--color", "#00FF00", "--title", "Cb"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["network"] == "cerebellum"
        assert data["title"] == "Cb"
        types = [e["type"] for e in data["elements"]]
        assert types.count("Segment") == 9
        assert types.count("Disk") == 9
        assert types.index("Disk") == 9

    def test_render_rectangular_to_file(self, cli, tmp_path):
        out = tmp_path / "drawing.json"
        yaml_path = tmp_path / "pair.yaml"
        yaml_path.write_text("name: pair\nnodes:\n  - {id: 1, pos: [1.0, 0.0]}\n  - {id: 2, pos: [0.0, 1.0]}\nedges:\n  - [1, 2]\n")
        code = cli.main(["--yaml", str(yaml_path), "--width", "400", "--height", "100", "--rectangular", "--out", str(out)])
        assert code == 0
        data = json.loads(out.read_text())
        disks = [e for e in data["elements"] if e["type"] == "Disk"]
        assert disks[0]["center"] == [400.0, 0.0]
        assert disks[1]["center"] == [0.0, 100.0]

    def test_png_and_graphml_outputs(self, cli, tmp_path, capsys):
        png = tmp_path / "panel.png"
        graphml = tmp_path / "net.graphml"
        assert cli.main(["thalamocortical", "--png", str(png), "--export-graphml", str(graphml)]) == 0
        assert png.stat().st_size > 0
        assert nx.read_graphml(str(graphml)).number_of_edges() == 10


class TestCliAnalysis:
    def test_validate_clean_dataset(self, cli, capsys):
        assert cli.main(["thalamocortical", "--validate"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["summary"]["errors"] == 0

    def test_validate_reports_errors(self, cli, tmp_path, capsys):
        yaml_path = tmp_path / "dup.yaml"
        yaml_path.write_text("nodes:\n  - {id: 1, pos: [0, 0]}\n  - {id: 2, pos: [1, 1]}\nedges:\n  - [1, 2]\n  - [1, 2]\n")
        assert cli.main(["--yaml", str(yaml_path), "--validate"]) == 1
        data = json.loads(capsys.readouterr().out)
        assert data["summary"]["errors"] == 1

    def test_stats(self, cli, capsys):
        assert cli.main(["cerebellum", "--stats"]) == 0
        stats = json.loads(capsys.readouterr().out)
        assert stats["components"] == 3
        assert stats["component_sizes"] == [3, 3, 3]

    def test_stats_still_writes_requested_outputs(self, cli, tmp_path, capsys):
        graphml = tmp_path / "net.graphml"
        out = tmp_path / "drawing.json"
        png = tmp_path / "panel.png"
        code = cli.main(
            ["cerebellum", "--stats", "--export-graphml", str(graphml), "--out", str(out), "--png", str(png)]
        )
        assert code == 0
        stats = json.loads(capsys.readouterr().out)
        assert stats["components"] == 3
        assert nx.read_graphml(str(graphml)).number_of_nodes() == 9
        assert json.loads(out.read_text())["network"] == "cerebellum"
        assert png.stat().st_size > 0

    def test_stats_with_graphml_only(self, cli, tmp_path, capsys):
        graphml = tmp_path / "net.graphml"
        assert cli.main(["thalamocortical", "--stats", "--export-graphml", str(graphml)]) == 0
        assert json.loads(capsys.readouterr().out)["nodes"] == 6
        assert nx.read_graphml(str(graphml)).number_of_edges() == 10

    def test_stats_with_png_keeps_stdout_to_stats(self, cli, tmp_path, capsys):
        png = tmp_path / "panel.png"
        assert cli.main(["cerebellum", "--stats", "--png", str(png)]) == 0
        stats = json.loads(capsys.readouterr().out)
        assert stats["name"] == "cerebellum"
        assert png.stat().st_size > 0
