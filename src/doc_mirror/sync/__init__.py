"""
Sync Module Package

Mirrors source documents into the documentation site.

Structure:
    - manager.py: DocsSyncManager - full sync of manifest entries
    - resolver.py: find_source_root - source project discovery

Usage:
    from doc_mirror.sync import SyncRequest, sync_docs, find_source_root
"""

from doc_mirror.sync.manager import DocsSyncManager, SyncOutcome, SyncRequest, page_path, render_page, sync_docs
from doc_mirror.sync.resolver import find_source_root

__all__ = ['DocsSyncManager', 'SyncOutcome', 'SyncRequest', 'page_path', 'render_page', 'sync_docs',
           'find_source_root']
