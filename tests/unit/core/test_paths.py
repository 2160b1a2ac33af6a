"""
test_paths.py
-------------
Unit tests for sonder.core.paths.
"""
from pathlib import Path

from sonder.core import paths


class TestLogDir:
    """Test default log directory resolution."""

    def test_default_is_per_user(self, monkeypatch):
        """Test logs default under the user's config directory."""
        monkeypatch.delenv("SONDER_LOG_DIR", raising=False)

        log_dir = paths._get_log_dir()

        assert log_dir == Path.home() / ".config" / "sonder" / "logs"
        assert Path(paths.__file__).resolve().parent not in log_dir.parents

    def test_environment_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SONDER_LOG_DIR", str(tmp_path / "sonder-logs"))
        assert paths._get_log_dir() == tmp_path / "sonder-logs"

    def test_nothing_created_on_lookup(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SONDER_LOG_DIR", str(tmp_path / "unused"))
        paths._get_log_dir()
        assert not (tmp_path / "unused").exists()
