"""Tests for configuration loading."""

import logging
from pathlib import Path

from cadence.config import HABITS_FILE, Config, load_config


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.conf")
        assert config == Config()
        assert config.preceding_days == 21
        assert config.following_days == 7
        assert config.completed_glyph == "*"
        assert config.today_glyph == "!"

    def test_parses_values(self, tmp_path):
        conf = tmp_path / "cadence.conf"
        conf.write_text(
            "\n".join(
                [
                    "# Graph settings",
                    "PRECEDING_DAYS=14",
                    "following_days = 3",
                    "GRAPH_COLUMN=30",
                    'COMPLETED_GLYPH="x" # done marker',
                    "TODAY_GLYPH='@'",
                    "SHOW_DONE_ALWAYS_GREEN=yes",
                    "SHOW_HABITS_ONLY_FOR_TODAY=false",
                    "HABITS_FILE=~/habits.json  # personal list",
                    "not a setting",
                ]
            )
        )
        config = load_config(conf)
        assert config.preceding_days == 14
        assert config.following_days == 3
        assert config.graph_column == 30
        assert config.completed_glyph == "x"
        assert config.today_glyph == "@"
        assert config.show_done_always_green is True
        assert config.show_habits_only_for_today is False
        assert config.habits_file == "~/habits.json"

    def test_invalid_values_keep_defaults(self, tmp_path, caplog):
        conf = tmp_path / "cadence.conf"
        conf.write_text("PRECEDING_DAYS=lots\nFOLLOWING_DAYS=-2\nSHOW_DONE_ALWAYS_GREEN=maybe\nTODAY_GLYPH=!!\n")
        with caplog.at_level(logging.WARNING, logger="cadence.config"):
            config = load_config(conf)
        assert config.preceding_days == 21
        assert config.following_days == 7
        assert config.show_done_always_green is False
        assert config.today_glyph == "!"
        assert "PRECEDING_DAYS" in caplog.text
        assert "SHOW_DONE_ALWAYS_GREEN" in caplog.text


class TestHabitsPath:
    def test_default(self):
        assert Config().habits_path == HABITS_FILE

    def test_expands_user(self):
        config = Config(habits_file="~/some/habits.json")
        assert "~" not in str(config.habits_path)
        assert config.habits_path == Path.home() / "some" / "habits.json"
