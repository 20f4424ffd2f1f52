"""Canadian personal (T1) and CCPC corporate tax engine."""
from __future__ import annotations

__version__ = "0.1.0"
