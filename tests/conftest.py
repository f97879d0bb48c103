"""
Pytest configuration and shared fixtures.
"""

import os
import sys
import tempfile
import shutil
from typing import Generator

import pytest

# Add src/ to path so the tests run without an install
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from doc_mirror.manifest import DocumentEntry


@pytest.fixture
def source_dir() -> Generator[str, None, None]:
    """Temporary checkout of the source project."""
    path = tempfile.mkdtemp(prefix="docs_src_")
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def output_dir() -> Generator[str, None, None]:
    """Temporary site output root."""
    path = tempfile.mkdtemp(prefix="docs_out_")
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def write_source(source_dir):
    """Write a source document relative to the source root."""
    def _write(relative_path: str, content: str) -> str:
        full_path = os.path.join(source_dir, relative_path)
        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        with open(full_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        return full_path
    return _write


@pytest.fixture
def read_page(output_dir):
    """Read the page written for an entry id."""
    def _read(entry_id: str) -> str:
        path = os.path.join(output_dir, "docs", *entry_id.split("/"), "+page.md")
        with open(path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    return _read


@pytest.fixture
def sample_manifest():
    """A small manifest with one local and two mirrored entries."""
    return (
        DocumentEntry("introduction", "Introduction", "README.md", local=True, section="Getting Started"),
        DocumentEntry("guide", "User Guide", "docs/guide.md", section="Getting Started"),
        DocumentEntry("core/memory", "Memory", "afs-guide/01-memory.md", section="Core Concepts"),
    )
