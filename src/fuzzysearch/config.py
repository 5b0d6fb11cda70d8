# Default relevance percentage (1..100); higher means stricter matching
DEFAULT_RELEVANCE: int = 75

# Pagination defaults (None = unbounded)
DEFAULT_OFFSET: int = 0
DEFAULT_LIMIT: int | None = None

# Page size used by the CLI and the web UI when no limit is given
TOP_K: int = 10

# Relevance is clamped into this range
MIN_RELEVANCE: int = 1
MAX_RELEVANCE: int = 100

# /* ~~~ record files the loader understands ~~~ */
DATA_SUFFIXES = (".json", ".jsonl", ".ndjson", ".csv")

# folders to skip when walking data roots
EXCLUDE_DIRS = {".git", ".hg", ".svn", ".idea", ".vscode", "node_modules", "__pycache__"}

# Progress logging (set FUZZYSEARCH_VERBOSE=1 to enable)
VERBOSE_ENV: str = "FUZZYSEARCH_VERBOSE"
