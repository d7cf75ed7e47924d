# tests/unit/test_cli.py
"""
Tests for the ancestry CLI.
"""

from __future__ import annotations

import json

from typer.testing import CliRunner

from ancestry import __version__
from ancestry.cli.cli import app

runner = CliRunner()


class TestVersion:
    """Tests for ancestry version."""

    def test_prints_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestTreeCommand:
    """Tests for ancestry tree."""

    def test_help(self):
        result = runner.invoke(app, ["tree", "--help"])

        assert result.exit_code == 0
        assert "--sort-by" in result.output

    def test_prints_hierarchy(self, site_dir):
        result = runner.invoke(app, ["tree", str(site_dir)])

        assert result.exit_code == 0, result.output
        for name in ["index.html", "index.md", "index.jade", "big.html", "test/folder2/"]:
            assert name in result.output
        assert "8 items in 4 directories" in result.output

    def test_members_are_listed_in_order(self, site_dir):
        result = runner.invoke(app, ["tree", str(site_dir), "--sort-by", "order"])

        assert result.exit_code == 0, result.output
        out = result.output
        assert out.index("index.md") < out.index("image.gif") < out.index("thing.htm") < out.index("page.html")

    def test_match_filters(self, site_dir):
        result = runner.invoke(app, ["tree", str(site_dir), "--match", "**/*.html"])

        assert result.exit_code == 0, result.output
        assert "image.gif" not in result.output
        assert "big.html" in result.output

    def test_missing_source_exits_1(self, tmp_path):
        result = runner.invoke(app, ["tree", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Not a directory" in result.output

    def test_bad_config_exits_1(self, site_dir, tmp_path):
        config = tmp_path / "ancestry.yaml"
        config.write_text("sortby: order\n")

        result = runner.invoke(app, ["tree", str(site_dir), "--config", str(config)])

        assert result.exit_code == 1
        assert "validation failed" in result.output

    def test_empty_directory(self, tmp_path):
        result = runner.invoke(app, ["tree", str(tmp_path)])

        assert result.exit_code == 0
        assert "No files found" in result.output


class TestNodeCommand:
    """Tests for ancestry node."""

    def test_prints_json(self, site_dir):
        result = runner.invoke(app, ["node", str(site_dir), "test/folder2/big.html"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["path"] == "test/folder2/big.html"
        assert data["parent"] == "test/index.md"
        assert data["root"] == "index.html"
        assert data["members"] == ["test/folder2/index.htm", "test/folder2/big.html"]
        assert data["siblings"] == ["test/folder/index.jade", "test/folder2/index.htm"]
        assert data["sibling_index"] == 1

    def test_multiple_paths(self, site_dir):
        result = runner.invoke(app, ["node", str(site_dir), "index.html", "test/index.md"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert [d["path"] for d in data] == ["index.html", "test/index.md"]
        assert data[0]["children"] == ["test/index.md"]

    def test_config_file_options(self, site_dir, tmp_path):
        config = tmp_path / "ancestry.yaml"
        config.write_text("sort_by: order\nsort_files_first: null\n")

        result = runner.invoke(app, ["node", str(site_dir), "test/page.html", "--config", str(config)])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["members"] == [
            "test/image.gif",
            "test/index.md",
            "test/thing.htm",
            "test/page.html",
        ]

    def test_reverse_flag(self, site_dir):
        result = runner.invoke(app, ["node", str(site_dir), "test/page.html", "--reverse"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["members"][-1] == "test/index.md"

    def test_unknown_path_exits_1(self, site_dir):
        result = runner.invoke(app, ["node", str(site_dir), "nope.md"])

        assert result.exit_code == 1
        assert "nope.md" in result.output
