"""
Constants Module

Defines constants used across the doc-mirror project.
"""

# =============================================================================
# Site Layout
# =============================================================================

# Route prefix of mirrored pages, e.g. /docs/core/memory
DOCS_ROUTE_PREFIX = "/docs"

# Directory under the output root that holds one folder per page
DOCS_OUTPUT_DIR = "docs"

# Page file written inside each page folder
PAGE_FILENAME = "+page.md"


# =============================================================================
# Source Project Discovery
# =============================================================================

# Environment variable with an explicit source root
SOURCE_ROOT_ENV = "AFS_SOURCE_ROOT"

# Sibling project that holds the source documents
SOURCE_PROJECT_DIR = "project-afs"

# File that identifies a checkout of the source project
SOURCE_MARKER_FILE = "README.md"

# Number of ancestor directories searched for the source project
SOURCE_SEARCH_DEPTH = 5


# =============================================================================
# Transformation
# =============================================================================

FENCE_MARKER = "```"

# Section label for manifest entries without one
DEFAULT_SECTION = "Other"
