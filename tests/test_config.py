"""Tests for configuration loading."""

from pathlib import Path

import pytest

from weeny.config import DATA_DIR, DATA_FILE, Config, load_config


@pytest.fixture
def conf_file(tmp_path):
    return tmp_path / "weeny.conf"


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.data_path == DATA_DIR / DATA_FILE
        assert config.autosave is True

    def test_data_path_expands_user(self):
        config = Config(data_dir="~/tasks")
        assert config.data_path == Path.home() / "tasks" / DATA_FILE


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "missing.conf") == Config()

    def test_reads_keys(self, conf_file, tmp_path):
        conf_file.write_text(
            f"# Weeny settings\n"
            f"DATA_DIR={tmp_path}/store\n"
            f"DATA_FILE=tasks.txt\n"
            f"AUTOSAVE=no\n"
        )
        config = load_config(conf_file)
        assert config.data_path == tmp_path / "store" / "tasks.txt"
        assert config.autosave is False

    def test_quoted_value_with_inline_comment(self, conf_file):
        conf_file.write_text('DATA_FILE="my # tasks.txt" # the file\n')
        assert load_config(conf_file).data_file == "my # tasks.txt"

    def test_unquoted_inline_comment_stripped(self, conf_file):
        conf_file.write_text("DATA_FILE=tasks.txt # the file\n")
        assert load_config(conf_file).data_file == "tasks.txt"

    def test_ignores_unknown_and_malformed_lines(self, conf_file):
        conf_file.write_text("COLOR=blue\nnot a setting\n\nAUTOSAVE=on\n")
        config = load_config(conf_file)
        assert config.autosave is True
        assert config.data_file == DATA_FILE

    def test_invalid_bool_keeps_default(self, conf_file, caplog):
        conf_file.write_text("AUTOSAVE=sometimes\n")
        config = load_config(conf_file)
        assert config.autosave is True
        assert "Ignoring invalid AUTOSAVE value" in caplog.text
