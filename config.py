"""
Configuration constants for simplegraph.

Settings that callers may want to change without touching code are read
from environment variables here; everything else is a plain constant.
"""

import os

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level used by the demo driver (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("SIMPLEGRAPH_LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# =============================================================================
# Query Configuration
# =============================================================================

# Default tie-break for max_degree: first_inserted, last_inserted, lexicographic
DEFAULT_TIE_BREAK = os.environ.get("SIMPLEGRAPH_TIE_BREAK", "first_inserted")

# =============================================================================
# Matrix Configuration
# =============================================================================

# Element type of adjacency matrices (entries are only ever 0 or 1)
MATRIX_DTYPE = "int8"
