import os
import sys
from pathlib import Path


# Walk every list after each operation while testing. Must be set before
# config is first imported.
os.environ.setdefault("POSTLIST_CHECK_INVARIANTS", "1")

sys.path.append(str(Path(__file__).resolve().parent.parent))
