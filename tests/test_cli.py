"""Tests for the main.py command line entrypoint."""

import json
import logging

import pytest

import main
from westeros.config_manager import ConfigManager


@pytest.fixture
def config_file(tmp_path, data_dir, reset_config, monkeypatch):
    """Write a config pointing at the sample data and a temporary log dir."""
    monkeypatch.setattr("westeros.config_manager.load_dotenv", lambda *a, **k: False)
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level

    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "paths": {"data_dir": data_dir},
        "logging": {"log_dir": str(tmp_path / "logs"), "console_level": "WARNING"},
    }), encoding="utf-8")
    yield str(path)

    for h in root.handlers:
        h.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    ConfigManager.reset()


class TestCli:

    def test_show_character(self, config_file, capsys):
        assert main.main(["--config", config_file, "show", "Jon Snow"]) == 0

        out = json.loads(capsys.readouterr().out)
        assert out["house"] == "House Stark"
        assert out["siblings"] == ["Sansa Stark", "Arya Stark", "Robb Stark"]

    def test_show_unknown_character(self, config_file):
        assert main.main(["--config", config_file, "show", "Hodor"]) == 1

    def test_audit_json(self, config_file, capsys):
        assert main.main(["--config", config_file, "audit", "--json"]) == 0

        report = json.loads(capsys.readouterr().out)
        assert report["total_missing"] > 0
        assert "name_not_in_aliases" in report["missing_by_kind"]

    def test_missing_data_dir_fails(self, tmp_path, monkeypatch, config_file):
        monkeypatch.setenv("WESTEROS_DATA_DIR", str(tmp_path / "nowhere"))

        assert main.main(["--config", config_file, "show", "Jon Snow"]) == 1
