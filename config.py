import os

LOG_LEVEL: str = os.getenv("POSTLIST_LOG_LEVEL", "WARNING")
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
# No log file unless a directory is given
LOG_DIR: str | None = os.getenv("POSTLIST_LOG_DIR")

# Walk every list after each mutation and merge, O(n) per operation
CHECK_INVARIANTS: bool = os.getenv("POSTLIST_CHECK_INVARIANTS", "0") == "1"
