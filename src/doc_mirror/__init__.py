"""
doc-mirror

Mirrors external Markdown documents into a statically-rendered
documentation site.

Usage:
    from doc_mirror.manifest import CONTENT_MAP, syncable_entries
    from doc_mirror.sync import SyncRequest, sync_docs
"""

__version__ = "0.1.0"
