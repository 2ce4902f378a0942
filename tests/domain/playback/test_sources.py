"""Tests for the local and streaming track sources and the source registry."""

import pytest

from music_deck.core.output import set_console_output
from music_deck.domain.library.models import Track
from music_deck.domain.playback import PlaybackController, PlaybackState, PlaybackStatus
from music_deck.domain.playback.sources import (
    SOURCES,
    InvalidLocatorError,
    LocalTrackSource,
    StreamingTrackSource,
    TrackSource,
    TrackSourceError,
    create_source,
    list_sources,
)


class TestLocalTrackSource:
    """Test the local file backend."""

    def test_load_derives_title_from_locator(self):
        source = LocalTrackSource()
        source.load_track("file:///local/song1.mp3")
        track = source.current_track()
        assert track.title == "song1.mp3"
        assert track.artist == "Local Artist"
        assert track.locator == "file:///local/song1.mp3"

    def test_nothing_loaded_initially(self):
        assert LocalTrackSource().current_track() is None

    def test_announces_transport(self, capsys):
        source = LocalTrackSource()
        source.load_track("/music/intro.flac")
        source.play()
        source.pause()
        source.stop()
        out = capsys.readouterr().out
        assert "Playing from local source: intro.flac" in out
        assert "Paused local player" in out
        assert "Stopped local player" in out

    def test_play_without_track_says_unknown(self, capsys):
        LocalTrackSource().play()
        assert "Playing from local source: Unknown" in capsys.readouterr().out

    def test_announce_disabled(self, capsys):
        """announce=False keeps transport messages off the console."""
        source = LocalTrackSource(announce=False)
        source.load_track("/music/intro.flac")
        source.play()
        assert capsys.readouterr().out == ""

    def test_console_output_disabled(self, capsys):
        set_console_output(False)
        LocalTrackSource().stop()
        assert capsys.readouterr().out == ""

    @pytest.mark.parametrize("locator", ["", "   "])
    def test_rejects_blank_locator(self, locator):
        source = LocalTrackSource()
        with pytest.raises(InvalidLocatorError) as exc_info:
            source.load_track(locator)
        assert exc_info.value.source_name == "local"
        assert source.current_track() is None


class TestStreamingTrackSource:
    """Test the mock streaming backend."""

    def test_load_prefixes_title(self):
        source = StreamingTrackSource()
        source.load_track("spotify://track/123")
        track = source.current_track()
        assert track.title == "Streaming: 123"
        assert track.artist == "Streaming Artist"

    def test_announces_transport(self, capsys):
        source = StreamingTrackSource()
        source.load_track("spotify://track/123")
        source.play()
        source.pause()
        source.stop()
        out = capsys.readouterr().out
        assert "Streaming from remote source: Streaming: 123" in out
        assert "Paused streaming player" in out
        assert "Stopped streaming player" in out

    def test_play_without_track_says_unknown(self, capsys):
        StreamingTrackSource().play()
        assert "Streaming from remote source: Unknown" in capsys.readouterr().out

    def test_rejects_blank_locator(self):
        with pytest.raises(TrackSourceError):
            StreamingTrackSource().load_track("")


class TestRegistry:
    """Test source lookup by name."""

    def test_lists_both_sources(self):
        assert list_sources() == ["local", "streaming"]

    @pytest.mark.parametrize("name,cls", [("local", LocalTrackSource), ("streaming", StreamingTrackSource)])
    def test_create_source(self, name, cls):
        source = create_source(name, announce=False)
        assert isinstance(source, cls)
        assert source.announce is False

    def test_unknown_source(self):
        with pytest.raises(ValueError, match="Unknown source: 'tape'"):
            create_source("tape")

    @pytest.mark.parametrize("name", sorted(SOURCES))
    def test_sources_satisfy_protocol(self, name):
        assert isinstance(create_source(name), TrackSource)


class TestControllerWithRealSources:
    """Drive the controller with both concrete backends."""

    @pytest.mark.parametrize("name", ["local", "streaming"])
    def test_play_loads_track_into_source(self, name, tracks):
        source = create_source(name, announce=False)
        controller = PlaybackController(source)
        for track in tracks:
            controller.add_to_queue(track)

        controller.play()

        assert controller.state is PlaybackState.PLAYING
        assert source.current_track().locator == tracks[0].locator

    def test_swap_mid_playback(self, tracks, capsys):
        """The demo flow: local for the first tracks, streaming after the swap."""
        controller = PlaybackController(LocalTrackSource())
        for track in tracks:
            controller.add_to_queue(track)

        controller.play()
        controller.next()
        controller.set_source(StreamingTrackSource())
        controller.next()

        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Playing from local source: song1.mp3",
            "Playing from local source: song2.mp3",
            "Streaming from remote source: Streaming: 123",
        ]

    def test_blank_locator_reports_source_unavailable(self):
        controller = PlaybackController(LocalTrackSource(announce=False))
        controller.add_to_queue(Track(title="Broken", artist="", locator=""))

        assert controller.play() is PlaybackStatus.SOURCE_UNAVAILABLE
        assert controller.state is PlaybackState.STOPPED
