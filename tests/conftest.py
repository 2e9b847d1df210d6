# Dynamically ensure the src/ layout is importable without installation
import os
import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

# Keep rule tracing deterministic regardless of the caller's environment
os.environ.pop("SMARTQUOTIFY_TRACE_RULES", None)
