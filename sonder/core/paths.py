#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the sonder project.

Per-user locations:
    ~/.config/sonder/
    └── logs/          # Application logs

The log directory can be moved with the SONDER_LOG_DIR environment
variable; the --log-dir command line flag overrides both per invocation.
Nothing is created at import time.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path


def _get_log_dir() -> Path:
    """
    Determine the default log directory.

    Returns:
        SONDER_LOG_DIR when set, else ~/.config/sonder/logs
    """
    override = os.environ.get("SONDER_LOG_DIR")
    if override:
        return Path(override).expanduser()
    return CONFIG_DIR / "logs"


# ----- User directories -----
CONFIG_DIR: Path = Path.home() / ".config" / "sonder"

# ---- Logs ----
LOG_DIR: Path = _get_log_dir()
