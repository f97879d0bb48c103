import posixpath
import re
from typing import Dict, Iterable

from doc_mirror.constants import DOCS_ROUTE_PREFIX

# Link destination of the form ./name.md (single segment, ASCII name, no anchor)
SIBLING_LINK_PATTERN = re.compile(r'\]\(\./([\w-]+\.md)\)', re.ASCII)


def build_link_lookup(link_table: Iterable) -> Dict[str, str]:
    """
    Map source file base names to entry ids.

    Items only need ``id`` and ``source`` attributes. When two sources share
    a base name the later item wins.
    """
    lookup = {}
    for entry in link_table:
        lookup[posixpath.basename(entry.source)] = entry.id
    return lookup


def rewrite_cross_links(text: str, link_table: Iterable) -> str:
    """
    Rewrite ``](./other.md)`` links to ``](/docs/<id>)`` site routes.

    Links to unknown file names are kept as written, as is every other link
    form (URLs, anchors, deeper relative paths). Broken links are reported by the site's
    link checker, not here.
    """
    lookup = build_link_lookup(link_table)

    def replace(match):
        filename = match.group(1)
        entry_id = lookup.get(filename)
        if entry_id:
            return f"]({DOCS_ROUTE_PREFIX}/{entry_id})"
        return match.group(0)

    return SIBLING_LINK_PATTERN.sub(replace, text)
