import os

from squares import config


def test_squares_file_defaults_to_working_directory(monkeypatch, tmp_path):
    monkeypatch.delenv("SQUARES_FILE", raising=False)
    monkeypatch.chdir(tmp_path)
    assert config.squares_file() == os.path.join(os.getcwd(), "squares.json")


def test_squares_file_absolute_path_kept(monkeypatch, tmp_path):
    target = str(tmp_path / "data" / "grid.json")
    monkeypatch.setenv("SQUARES_FILE", target)
    assert config.squares_file() == target


def test_server_settings(monkeypatch):
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert config.server_host() == "0.0.0.0"
    assert config.server_port() == 9001
    assert config.log_level() == "DEBUG"
