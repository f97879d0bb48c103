import os
from typing import Optional

from dotenv import load_dotenv

from doc_mirror.constants import SOURCE_ROOT_ENV

load_dotenv()

# ============================================================
# Environment Configuration
# ============================================================
# Output root of the site (the SvelteKit routes directory)
DOCMIRROR_OUTPUT_ROOT: str = os.getenv("DOCMIRROR_OUTPUT_ROOT", os.path.join("src", "routes"))

# Optional: JSON manifest used instead of the built-in content map
DOCMIRROR_MANIFEST: Optional[str] = os.getenv("DOCMIRROR_MANIFEST") or None


def get_source_root_override() -> Optional[str]:
    """Explicit checkout of the source project (AFS_SOURCE_ROOT), read at call time."""
    return os.getenv(SOURCE_ROOT_ENV) or None
