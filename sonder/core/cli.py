#!/usr/bin/env python3
"""
cli.py
------
Shared CLI helpers for sonder commands.

Functions:
    setup_logger: Initialize SonderLogger for CLI operations

Usage:
    from sonder.core.cli import setup_logger

    logger = setup_logger(log_dir, "cli")
    logger.log_info("Loading snapshot...")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path

# --- Local imports ---
from sonder.core.logging_manager import SonderLogger


def setup_logger(log_dir: Path, component_name: str) -> SonderLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    a SonderLogger instance for the specified component.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g., 'cli')

    Returns:
        Configured SonderLogger instance

    Examples:
        >>> from sonder.core.paths import LOG_DIR
        >>> logger = setup_logger(LOG_DIR, "cli")
        >>> logger.log_info("Starting...")
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return SonderLogger(operations_log_dir, component_name=component_name)
