import os
import sys
import tempfile
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Settings are read once at import time, so pin them before the app loads.
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")
os.environ.setdefault("HISTORY_DB_PATH", str(Path(tempfile.mkdtemp()) / "history.db"))
os.environ.setdefault("AI_PROVIDER", "openai")
