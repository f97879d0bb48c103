"""
Docs Sync Manager Module

Mirrors manifest entries from the source project into page files of the
documentation site.
"""

import os
from dataclasses import dataclass
from typing import Optional, Sequence

from doc_mirror.constants import DOCS_OUTPUT_DIR, PAGE_FILENAME
from doc_mirror.converter import neutralize_markup, rewrite_cross_links
from doc_mirror.logger import logger


@dataclass
class SyncRequest:
    """
    Input of one sync run.

    ``entries`` are the documents to mirror. ``link_table`` is used to
    resolve cross links and may be wider than ``entries`` (local entries
    are link targets without being mirrored); it defaults to ``entries``.
    """
    source_root: str
    output_root: str
    entries: Sequence
    link_table: Optional[Sequence] = None


@dataclass
class SyncOutcome:
    written: int = 0
    skipped: int = 0

    @property
    def total(self) -> int:
        return self.written + self.skipped


def page_path(output_root: str, entry_id: str) -> str:
    """Output file of an entry; ids with "/" map to nested folders."""
    return os.path.join(output_root, DOCS_OUTPUT_DIR, *entry_id.split("/"), PAGE_FILENAME)


def render_page(title: str, body: str) -> str:
    # Titles are inserted verbatim; they must not contain a double quote.
    return f'---\ntitle: "{title}"\n---\n\n{body}'


class DocsSyncManager:
    """Runs a full (non-incremental) sync of the requested entries."""

    def __init__(self, request: SyncRequest):
        self.request = request
        if request.link_table is not None:
            self.link_table = request.link_table
        else:
            self.link_table = request.entries

    def run(self) -> SyncOutcome:
        outcome = SyncOutcome()
        entries = self.request.entries

        logger.info(f"源目录: {self.request.source_root}", icon="📍")
        logger.info(f"输出目录: {self.request.output_root}", icon="📂")

        with logger.progress(len(entries), "🔄 同步进度") as update:
            for entry in entries:
                if self.sync_entry(entry):
                    outcome.written += 1
                else:
                    outcome.skipped += 1
                update(1)

        logger.summary_table("📊 同步汇总", {
            "✅ 成功写入": outcome.written,
            "⚠️ 跳过 (源文件缺失)": outcome.skipped,
        })
        return outcome

    def sync_entry(self, entry) -> bool:
        """
        Mirror one entry.

        Returns:
            True when the page was written, False when the source file is missing

        Raises:
            OSError: any read/write failure other than a missing source file
        """
        source_path = os.path.join(self.request.source_root, entry.source)

        # newline="" keeps the source line endings as they are
        try:
            with open(source_path, "r", encoding="utf-8", newline="") as f:
                raw_content = f.read()
        except (FileNotFoundError, NotADirectoryError):
            # A parent of the source path that is a file also means "no such document"
            logger.warning(f"跳过 {entry.id}: 未找到源文件 {source_path}")
            return False

        content = neutralize_markup(raw_content)
        content = rewrite_cross_links(content, self.link_table)

        out_path = page_path(self.request.output_root, entry.id)
        os.makedirs(os.path.dirname(out_path), exist_ok=True)
        with open(out_path, "w", encoding="utf-8", newline="") as f:
            f.write(render_page(entry.title, content))

        logger.debug(f"已写入 {entry.id} -> {out_path}")
        return True


def sync_docs(request: SyncRequest) -> SyncOutcome:
    """Mirror ``request.entries`` into the site and return the counts."""
    return DocsSyncManager(request).run()
