#!/usr/bin/env python3
"""
Integration tests for the listing CLI.
"""
import pytest
import yaml
from click.testing import CliRunner

from postkit.builders.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def base_args(posts_dir, tmp_path):
    return ["--posts-dir", str(posts_dir), "--log-dir", str(tmp_path / "logs")]


class TestListingCLI:
    def test_show(self, runner, base_args, write_post, valid_post_content, minimal_post_content):
        write_post("rest.md", valid_post_content)
        write_post("minimal.md", minimal_post_content)
        result = runner.invoke(cli, base_args + ["show"])
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0] == "2024-02-01  Minimal"
        assert "2024-01-15  REST in Practice" in result.output
        assert "images/cover.png" in result.output

    def test_show_empty(self, runner, base_args):
        result = runner.invoke(cli, base_args + ["show"])
        assert result.exit_code == 0
        assert "No posts found" in result.output

    def test_build_writes_yaml(self, runner, base_args, write_post, valid_post_content, tmp_path):
        write_post("rest.md", valid_post_content)
        output = tmp_path / "out" / "posts.yaml"
        result = runner.invoke(cli, base_args + ["build", "--output", str(output)])
        assert result.exit_code == 0, result.output
        data = yaml.safe_load(output.read_text(encoding="utf-8"))
        assert data["posts"][0]["slug"] == "rest"

    def test_build_reports_unloadable_posts(self, runner, base_args, write_post, tmp_path):
        write_post("bad.md", "---\ntitle: x\n---\nNo date.\n")
        result = runner.invoke(cli, base_args + ["build", "--output", str(tmp_path / "posts.yaml")])
        assert result.exit_code == 1
        assert "could not be loaded" in result.output

    def test_missing_posts_dir(self, runner, tmp_path):
        args = ["--posts-dir", str(tmp_path / "nope"), "--log-dir", str(tmp_path / "logs"), "show"]
        result = runner.invoke(cli, args)
        assert result.exit_code == 1
        assert "ListingError" in result.output
