"""Tests for the demo runner, context setup and CLI entry point."""

from unittest.mock import patch

import pytest
from loguru import logger

from music_deck import cli
from music_deck.context import AppContext
from music_deck.core.config import Config
from music_deck.core.output import is_console_output_enabled
from music_deck.domain.playback import LocalTrackSource, PlaybackState
from music_deck.main import DEMO_TRACKS, interactive_mode, run_demo, setup_context


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Keep config lookups and the log file inside a temp dir."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    for name in ("MUSIC_DECK_SOURCE", "MUSIC_DECK_LOG_LEVEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    # Drop the file sink added by setup_loguru
    logger.remove()


class TestRunDemo:
    def test_demo_output(self, capsys):
        ctx = AppContext.create(Config())

        assert run_demo(ctx) == 0

        out = capsys.readouterr().out
        lines = [
            "Playing from local source: song1.mp3",
            "Playing from local source: song2.mp3",
            "Streaming from remote source: Streaming: 123",
            "Reached end of queue.",
            "Paused streaming player",
            "Stopped streaming player",
        ]
        positions = [out.index(line) for line in lines]
        assert positions == sorted(positions)
        assert "Last track: Song3.mp3 by ArtistC (stopped)" in out

    def test_demo_final_state(self):
        ctx = AppContext.create(Config())
        run_demo(ctx)
        assert ctx.controller.state is PlaybackState.STOPPED
        assert ctx.controller.cursor == len(DEMO_TRACKS) - 1
        assert ctx.controller.source.name == "streaming"


class TestSetupContext:
    def test_defaults(self, isolated_home):
        ctx = setup_context()
        assert isinstance(ctx.controller.source, LocalTrackSource)
        assert (isolated_home / "data" / "music-deck" / "music-deck.log").exists()

    def test_quiet_disables_console(self, isolated_home):
        ctx = setup_context(quiet=True)
        assert is_console_output_enabled() is False
        assert ctx.console.quiet is True

    def test_log_level_override(self, isolated_home):
        ctx = setup_context(log_level="debug")
        assert ctx.config.logging.level == "DEBUG"

    def test_bad_log_level_in_config_starts_with_default(self, isolated_home):
        (isolated_home / "config.toml").write_text('[logging]\nlevel = "verbose"\n', encoding="utf-8")
        ctx = setup_context()
        assert ctx.config.logging.level == "INFO"


class TestInteractiveMode:
    def test_runs_commands_until_quit(self):
        ctx = AppContext.create(Config())

        with patch("builtins.input", side_effect=["add a.mp3", "play", "quit"]) as mock_input:
            assert interactive_mode(ctx) == 0

        assert mock_input.call_count == 3
        assert ctx.controller.state is PlaybackState.STOPPED
        assert len(ctx.controller.queue) == 1

    def test_eof_exits(self):
        with patch("builtins.input", side_effect=EOFError):
            assert interactive_mode(AppContext.create(Config())) == 0

    def test_keyboard_interrupt_keeps_running(self, capsys):
        with patch("builtins.input", side_effect=[KeyboardInterrupt, "quit"]):
            assert interactive_mode(AppContext.create(Config())) == 0
        assert "Use 'quit' or 'exit'" in capsys.readouterr().out


class TestCli:
    def test_demo_subcommand(self, isolated_home, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["music-deck", "demo", "--source", "streaming"])

        with pytest.raises(SystemExit) as exc_info:
            cli.main()

        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "Streaming from remote source: Streaming: song1.mp3" in out
        assert "Playing from local source: 123" in out
