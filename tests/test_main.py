"""
Tests for settings and the entry point.
"""

import io
import json
import logging

import pytest

from movie_ratings.config import Settings
from movie_ratings.logging_config import get_logger, setup_logging
from movie_ratings.main import build_store, main, parse_args


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """No settings leak in from the environment."""
    for name in ("MOVIE_RATINGS_SEED_FILE", "LOG_LEVEL", "MOVIE_RATINGS_LOG_FILE",
                 "NO_COLOR", "MOVIE_RATINGS_SHOW_RETURNED"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_logging():
    """main() replaces the root handlers, close the new ones and put the old ones back."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSettings:
    """Tests for environment and command-line settings."""

    def test_defaults(self):
        assert Settings.from_env() == Settings()

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("MOVIE_RATINGS_SEED_FILE", "movies.json")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("NO_COLOR", "")
        monkeypatch.setenv("MOVIE_RATINGS_SHOW_RETURNED", "yes")

        settings = Settings.from_env()
        assert settings.seed_file == "movies.json"
        assert settings.log_level == "DEBUG"
        assert settings.color is False
        assert settings.show_returned is True

    def test_flags_override(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        settings = parse_args(["--log-level", "info", "--no-color", "--show-returned"])
        assert settings.log_level == "INFO"
        assert settings.color is False
        assert settings.show_returned is True


class TestMain:
    """Tests for startup and shutdown."""

    def test_build_store_default(self):
        store = build_store(Settings())
        assert store.find_movie(3).ratings == [5]

    def test_build_store_from_file(self, tmp_path):
        path = tmp_path / "movies.json"
        path.write_text(json.dumps([{"id": 1, "title": "Heat", "ratings": [4]}]), encoding="utf-8")
        store = build_store(Settings(seed_file=str(path)))
        assert [m.title for m in store.movies] == ["Heat"]

    def test_run_and_exit(self, monkeypatch, capsys):
        """A whole session on stdin: top rated, then exit."""
        monkeypatch.setattr("sys.stdin", io.StringIO("3\n5\n"))
        main(["--no-color"])
        out = capsys.readouterr().out

        assert "Top rated movie is 'Bigfoot' with an average rating of 5.0 based on 1 ratings." in out
        assert out.rstrip().endswith("Exiting movie rating system.")

    def test_input_ends_at_sub_prompt(self, monkeypatch, capsys):
        """stdin ending after option 2 exits with the normal message."""
        monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))
        main(["--no-color"])
        assert capsys.readouterr().out.rstrip().endswith("Exiting movie rating system.")

    def test_bad_log_level_in_environment(self, monkeypatch, capsys):
        """An unknown LOG_LEVEL is a usage error, not a traceback."""
        monkeypatch.setenv("LOG_LEVEL", "verbose")
        with pytest.raises(SystemExit) as exc:
            main(["--no-color"])
        assert exc.value.code == 2
        assert "invalid LOG_LEVEL 'VERBOSE'" in capsys.readouterr().err

    def test_session_errors_are_not_startup_errors(self, monkeypatch, capsys):
        """Only building the store is reported as a failed startup."""
        def broken_run(self):
            raise ValueError("boom")

        monkeypatch.setattr("movie_ratings.main.MenuController.run", broken_run)
        with pytest.raises(ValueError, match="boom"):
            main(["--no-color"])
        assert "ERROR:" not in capsys.readouterr().out

    def test_bad_seed_file_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--seed-file", str(tmp_path / "missing.json")])
        assert exc.value.code == 1
        assert "ERROR:" in capsys.readouterr().out

    def test_keyboard_interrupt(self, monkeypatch, capsys):
        def interrupt(prompt=""):
            raise KeyboardInterrupt

        monkeypatch.setattr("builtins.input", interrupt)
        with pytest.raises(SystemExit) as exc:
            main(["--no-color"])
        assert exc.value.code == 0
        assert "Exiting movie rating system." in capsys.readouterr().out


class TestLogging:
    """Tests for the logging setup."""

    def test_log_file(self, tmp_path):
        setup_logging(level="info", log_file="ratings.log", log_dir=str(tmp_path))
        get_logger("movie_ratings.test").info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = (tmp_path / "ratings.log").read_text(encoding="utf-8")
        assert "movie_ratings.test - INFO - hello" in content
