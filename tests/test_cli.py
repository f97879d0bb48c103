"""
Tests for the docmirror command line.
"""

import json
import os

import pytest

from doc_mirror import cli


@pytest.fixture(autouse=True)
def no_env(monkeypatch):
    monkeypatch.delenv("AFS_SOURCE_ROOT", raising=False)
    monkeypatch.setattr(cli.config, "DOCMIRROR_MANIFEST", None)


@pytest.fixture
def manifest_file(source_dir):
    path = os.path.join(source_dir, "manifest.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump([
            {"id": "intro", "title": "Intro", "source": "README.md", "local": True, "section": "Start"},
            {"id": "guide", "title": "Guide", "source": "docs/guide.md", "section": "Start"},
            {"id": "ref/cli", "title": "CLI", "source": "docs/cli.md", "section": "Reference"},
        ], f)
    return path


def test_sync_command(source_dir, output_dir, write_source, read_page, manifest_file):
    write_source("docs/guide.md", "Start at [intro](./README.md).")

    code = cli.main(["sync", "--source-root", source_dir, "--output-root", output_dir,
                     "--manifest", manifest_file])

    assert code == 0
    assert "[intro](/docs/intro)" in read_page("guide")
    assert not os.path.exists(os.path.join(output_dir, "docs", "intro"))
    assert not os.path.exists(os.path.join(output_dir, "docs", "ref"))


def test_options_without_command_mean_sync(source_dir, output_dir, write_source, read_page, manifest_file):
    write_source("docs/guide.md", "# Guide")

    assert cli.main(["--source-root", source_dir, "--output-root", output_dir, "--manifest", manifest_file]) == 0
    assert "# Guide" in read_page("guide")


def test_invalid_manifest_exit_code(source_dir, output_dir):
    path = os.path.join(source_dir, "bad.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump([{"id": "a", "title": "A", "source": "a.md"}, {"id": "a", "title": "B", "source": "b.md"}], f)

    assert cli.main(["sync", "--source-root", source_dir, "--output-root", output_dir, "--manifest", path]) == 1


def test_io_failure_exit_code(source_dir, output_dir, manifest_file):
    os.makedirs(os.path.join(source_dir, "docs", "guide.md"))

    code = cli.main(["sync", "--source-root", source_dir, "--output-root", output_dir,
                     "--manifest", manifest_file])

    assert code == 1


def test_sections_command(manifest_file, capsys):
    assert cli.main(["sections", "--manifest", manifest_file]) == 0

    out = capsys.readouterr().out
    assert "/docs/intro  Intro (local)" in out
    assert out.index("/docs/guide") < out.index("/docs/ref/cli")


def test_toc_command(write_source, capsys):
    path = write_source("docs/page.md", "# T\n\n## One\n\n### Two\n")

    assert cli.main(["toc", path]) == 0

    out = capsys.readouterr().out
    assert "- One\n  - Two" in out


def test_load_entries_defaults_to_content_map():
    assert cli.load_entries(None) is cli.CONTENT_MAP
