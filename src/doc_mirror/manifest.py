"""
Manifest Module

The ordered list of documents mirrored into the site. Each entry maps a
logical id (the route under /docs) to a source file in the AFS project.
"""

import json
import os
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from doc_mirror.logger import logger


class ManifestError(ValueError):
    """Raised when a manifest has duplicate ids, incomplete entries or mistyped fields."""


@dataclass(frozen=True)
class DocumentEntry:
    id: str
    title: str
    source: str
    local: bool = False
    section: Optional[str] = None


Manifest = Tuple[DocumentEntry, ...]


CONTENT_MAP: Manifest = (
    DocumentEntry("introduction", "Introduction", "README.md", local=True, section="Getting Started"),
    DocumentEntry("architecture", "Architecture", "docs/agentic-workflow-overview.md", section="Getting Started"),
    DocumentEntry("daily-operations", "Daily Operations", "docs/daily-operations.md", section="Getting Started"),
    DocumentEntry("tutorial", "Step-by-step Tutorial", "docs/tutorial.md", local=True, section="Getting Started"),
    DocumentEntry("core/cli-overview", "CLI Guide Overview", "afs-guide/00-overview.md", local=True, section="Core Concepts"),
    DocumentEntry("core/memory", "Memory", "afs-guide/01-memory.md", local=True, section="Core Concepts"),
    DocumentEntry("core/query", "Query", "afs-guide/02-query.md", local=True, section="Core Concepts"),
    DocumentEntry("core/graph", "Graph", "afs-guide/03-graph.md", local=True, section="Core Concepts"),
    DocumentEntry("core/agent", "Agent", "afs-guide/04-agent.md", local=True, section="Core Concepts"),
    DocumentEntry("core/session", "Session", "afs-guide/05-session.md", local=True, section="Core Concepts"),
    DocumentEntry("core/attachment", "Attachment", "afs-guide/06-attachment.md", local=True, section="Core Concepts"),
    DocumentEntry("operations/admin", "Admin", "afs-guide/07-admin.md", local=True, section="Operations"),
    DocumentEntry("operations/maintenance", "Maintenance", "afs-guide/08-maintenance.md", local=True, section="Operations"),
    DocumentEntry("operations/scheduler", "Scheduler", "afs-guide/09-scheduler.md", local=True, section="Operations"),
    DocumentEntry("operations/models", "Models", "afs-guide/10-models.md", local=True, section="Operations"),
    DocumentEntry("integration", "Integration Guide", "docs/integration-guide.md", section="Integrations"),
    DocumentEntry("workflow-patterns", "Workflow Patterns", "docs/workflow-patterns.md", section="Integrations"),
    DocumentEntry("integrations/non-cli", "Non-CLI APIs", "afs-guide/11-non-cli.md", local=True, section="Integrations"),
    DocumentEntry("cli-reference", "CLI Reference", "docs/cli-reference.md", section="Reference"),
    DocumentEntry("cli-addendum", "CLI Addendum", "skills/afs-skills/SKILL.md", local=True, section="Reference"),
    DocumentEntry("reference/caveats-testing", "Caveats & Testing", "afs-guide/12-caveats-testing.md", local=True, section="Reference"),
)


def validate_manifest(entries: Iterable[DocumentEntry]) -> None:
    """
    Check that every entry is complete and every id is unique.

    Raises:
        ManifestError: on the first violation found
    """
    seen = set()
    for index, entry in enumerate(entries):
        for field_name in ("id", "title", "source"):
            value = getattr(entry, field_name)
            if not isinstance(value, str) or not value:
                raise ManifestError(f"Entry #{index} has no {field_name}: {entry!r}")
        if entry.id in seen:
            raise ManifestError(f"Duplicate manifest id: {entry.id}")
        seen.add(entry.id)


def _entry_from_dict(index: int, data: Dict[str, Any]) -> DocumentEntry:
    # Both the site's own key names (slug/source/local/section) and the
    # longer forms (id/sourcePath/isLocal/group) are accepted.
    if not isinstance(data, dict):
        raise ManifestError(f"Entry #{index} is not an object: {data!r}")

    entry_id = data.get("id", data.get("slug"))
    source = data.get("source", data.get("sourcePath"))
    title = data.get("title")
    for name, value in (("id", entry_id), ("title", title), ("source", source)):
        if not value:
            raise ManifestError(f"Entry #{index} is missing required field '{name}'")

    local = data.get("local", data.get("isLocal", False))
    if not isinstance(local, bool):
        raise ManifestError(f"Entry #{index} field 'local' must be true or false, got {local!r}")

    section = data.get("section", data.get("group"))
    if section is not None and not isinstance(section, str):
        raise ManifestError(f"Entry #{index} field 'section' must be a string, got {section!r}")

    return DocumentEntry(id=entry_id, title=title, source=source, local=local, section=section)


def load_manifest(path: str) -> Manifest:
    """
    Load a manifest from a JSON file.

    Args:
        path: JSON file holding a list of entries or {"entries": [...]}

    Returns:
        Validated, immutable manifest

    Raises:
        ManifestError: malformed JSON, wrong shape or invalid entries
        OSError: the file cannot be read
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ManifestError(f"清单文件 JSON 格式错误: {e}") from e

    # Support both dict format and plain list format
    if isinstance(data, dict):
        data = data.get("entries", [])
    if not isinstance(data, list):
        raise ManifestError(f"Manifest must be a list of entries: {path}")

    entries = tuple(_entry_from_dict(i, item) for i, item in enumerate(data))
    validate_manifest(entries)
    logger.debug(f"已加载清单 {os.path.basename(path)}: {len(entries)} 个条目")
    return entries


def syncable_entries(entries: Iterable[DocumentEntry]) -> Manifest:
    """Entries mirrored from the source project (local entries excluded)."""
    return tuple(e for e in entries if not e.local)


def local_entries(entries: Iterable[DocumentEntry]) -> Manifest:
    return tuple(e for e in entries if e.local)
