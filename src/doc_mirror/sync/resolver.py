import os
from typing import Optional

from doc_mirror import config
from doc_mirror.constants import SOURCE_MARKER_FILE, SOURCE_PROJECT_DIR, SOURCE_SEARCH_DEPTH
from doc_mirror.logger import logger


def find_source_root(project_root: str, override: Optional[str] = None) -> str:
    """
    Locate the checkout of the source project.

    Order:
        1. ``override``, else the AFS_SOURCE_ROOT environment variable
        2. a ``project-afs`` folder with a README.md next to one of the
           first few ancestors of ``project_root``
        3. ``<project_root>/../project-afs``
    """
    explicit = override or config.get_source_root_override()
    if explicit:
        return os.path.abspath(explicit)

    current = os.path.abspath(project_root)
    for _ in range(SOURCE_SEARCH_DEPTH):
        parent = os.path.dirname(current)
        candidate = os.path.join(parent, SOURCE_PROJECT_DIR)
        if os.path.exists(os.path.join(candidate, SOURCE_MARKER_FILE)):
            logger.debug(f"自动检测到源项目: {candidate}", icon="🏠")
            return candidate
        current = parent

    return os.path.normpath(os.path.join(os.path.abspath(project_root), "..", SOURCE_PROJECT_DIR))
