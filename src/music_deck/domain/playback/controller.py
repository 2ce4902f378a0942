"""
Playback controller for Music Deck.

Owns the play queue, the cursor into it and the current PlaybackState, and
delegates transport to whichever TrackSource is bound. One controller is
created explicitly at startup and handed to every collaborator through
AppContext; there is no module-level instance.

Every operation runs under a single re-entrant lock guarding the
(queue, cursor, state) triple. State changes are published to subscribers
after they commit, while the lock is still held, so all subscribers observe
states in commit order.
"""

import itertools
import threading
from typing import Any, Callable, Dict, List, Optional, Tuple

from loguru import logger

from music_deck.core.output import log
from music_deck.domain.library.models import Track

from .sources.base import TrackSource
from .sources.exceptions import TrackSourceError
from .state import PlaybackState, PlaybackStatus

# Cursor value when no queue position is selected
NO_CURSOR = -1

StateCallback = Callable[[PlaybackState], None]


class PlaybackController:
    """Queue editing, cursor arithmetic and transport state machine.

    Boundary conditions (empty queue, bad index, end/start of queue, missing
    or failing backend) are returned as PlaybackStatus values and never raised.
    """

    def __init__(self, source: Optional[TrackSource] = None):
        self._source = source
        self._queue: List[Track] = []
        self._cursor: int = NO_CURSOR
        self._state = PlaybackState.STOPPED

        self._subscribers: Dict[int, StateCallback] = {}
        self._subscriber_ids = itertools.count()

        # RLock so subscribers and compound operations can re-enter
        self._lock = threading.RLock()

    # ---------- accessors ----------

    @property
    def queue(self) -> Tuple[Track, ...]:
        with self._lock:
            return tuple(self._queue)

    @property
    def cursor(self) -> int:
        with self._lock:
            return self._cursor

    @property
    def state(self) -> PlaybackState:
        with self._lock:
            return self._state

    @property
    def source(self) -> Optional[TrackSource]:
        with self._lock:
            return self._source

    @property
    def current_track(self) -> Optional[Track]:
        """Track at the cursor, or None when the cursor is unset."""
        with self._lock:
            return self._current_track_unlocked()

    @property
    def current_title(self) -> Optional[str]:
        track = self.current_track
        return track.title if track else None

    @property
    def current_artist(self) -> Optional[str]:
        track = self.current_track
        return track.artist if track else None

    def get_status(self) -> Dict[str, Any]:
        """Snapshot of the controller for display."""
        with self._lock:
            track = self._current_track_unlocked()
            return {
                "state": self._state.value,
                "cursor": self._cursor,
                "queue_length": len(self._queue),
                "title": track.title if track else None,
                "artist": track.artist if track else None,
                "source": self._source.name if self._source else None,
            }

    # ---------- backend ----------

    def set_source(self, source: Optional[TrackSource]) -> None:
        """Bind a different backend.

        No transport call is made; the new source is used from the next
        play/pause/stop onwards, even if a track is currently playing.
        """
        with self._lock:
            old_name = self._source.name if self._source else None
            self._source = source
            logger.info(
                f"Track source changed: {old_name} -> {source.name if source else None}"
            )

    # ---------- queue editing ----------

    def add_to_queue(self, track: Track) -> None:
        """Append a track to the end of the queue."""
        with self._lock:
            self._queue.append(track)
            logger.debug(
                f"Queued '{track.title}' at position {len(self._queue) - 1}"
            )

    def remove_from_queue(self, index: int) -> PlaybackStatus:
        """Remove the track at ``index``.

        Out-of-range indices are ignored. Removing at or before the cursor
        moves the cursor back by one (to NO_CURSOR at the floor).
        """
        with self._lock:
            if not self._in_bounds_unlocked(index):
                logger.debug(
                    f"remove_from_queue ignored: index {index} out of range (len={len(self._queue)})"
                )
                return PlaybackStatus.INDEX_OUT_OF_RANGE

            removed = self._queue.pop(index)
            if index <= self._cursor:
                self._cursor = max(NO_CURSOR, self._cursor - 1)

            logger.debug(
                f"Removed '{removed.title}' from position {index}; cursor={self._cursor}"
            )
            return PlaybackStatus.OK

    def move_in_queue(self, from_index: int, to_index: int) -> PlaybackStatus:
        """Move the track at ``from_index`` to ``to_index``.

        The cursor follows its track when that track is the one moved.
        Otherwise a cursor inside the affected range shifts by one position
        towards ``from_index``; it tracks positions, not track identity.
        """
        with self._lock:
            if not (
                self._in_bounds_unlocked(from_index)
                and self._in_bounds_unlocked(to_index)
            ):
                logger.debug(
                    f"move_in_queue ignored: {from_index} -> {to_index} out of range "
                    f"(len={len(self._queue)})"
                )
                return PlaybackStatus.INDEX_OUT_OF_RANGE

            track = self._queue.pop(from_index)
            self._queue.insert(to_index, track)

            if self._cursor == from_index:
                self._cursor = to_index
            elif min(from_index, to_index) <= self._cursor <= max(from_index, to_index):
                if from_index < to_index:
                    self._cursor -= 1
                else:
                    self._cursor += 1

            logger.debug(
                f"Moved '{track.title}' {from_index} -> {to_index}; cursor={self._cursor}"
            )
            return PlaybackStatus.OK

    # ---------- transport ----------

    def play(self) -> PlaybackStatus:
        """Load and play the track at the cursor.

        Starts from the first track when the cursor is unset.
        """
        with self._lock:
            previous_cursor = self._cursor
            if self._cursor == NO_CURSOR and self._queue:
                self._cursor = 0

            track = self._current_track_unlocked()
            if track is None:
                log("No tracks to play.")
                return PlaybackStatus.EMPTY_QUEUE

            def start(source: TrackSource) -> None:
                source.load_track(track.locator)
                source.play()

            if not self._transport_unlocked("play", start):
                self._cursor = previous_cursor
                return PlaybackStatus.SOURCE_UNAVAILABLE

            self._commit_state_unlocked(PlaybackState.PLAYING)
            return PlaybackStatus.OK

    def pause(self) -> PlaybackStatus:
        """Pause transport. Applies in every state, including STOPPED."""
        with self._lock:
            if not self._transport_unlocked("pause", lambda source: source.pause()):
                return PlaybackStatus.SOURCE_UNAVAILABLE
            self._commit_state_unlocked(PlaybackState.PAUSED)
            return PlaybackStatus.OK

    def stop(self) -> PlaybackStatus:
        """Stop transport. Applies in every state."""
        with self._lock:
            if not self._transport_unlocked("stop", lambda source: source.stop()):
                return PlaybackStatus.SOURCE_UNAVAILABLE
            self._commit_state_unlocked(PlaybackState.STOPPED)
            return PlaybackStatus.OK

    def next(self) -> PlaybackStatus:
        """Advance the cursor and play. No wrap-around at the end."""
        with self._lock:
            if self._cursor + 1 >= len(self._queue):
                log("Reached end of queue.")
                return PlaybackStatus.QUEUE_BOUNDARY
            return self._step_unlocked(+1)

    def previous(self) -> PlaybackStatus:
        """Move the cursor back and play."""
        with self._lock:
            if self._cursor <= 0:
                log("Already at start of queue.")
                return PlaybackStatus.QUEUE_BOUNDARY
            return self._step_unlocked(-1)

    # ---------- notifications ----------

    def subscribe(self, callback: StateCallback) -> Callable[[], None]:
        """Receive the current state now and every published state after it.

        Args:
            callback: Called with each PlaybackState, synchronously

        Returns:
            Zero-argument function that cancels the subscription
        """
        with self._lock:
            subscription_id = next(self._subscriber_ids)
            self._subscribers[subscription_id] = callback
            self._deliver_unlocked(callback, self._state)

        def unsubscribe() -> None:
            with self._lock:
                self._subscribers.pop(subscription_id, None)

        return unsubscribe

    # ---------- internals (caller must hold self._lock) ----------

    def _in_bounds_unlocked(self, index: int) -> bool:
        return 0 <= index < len(self._queue)

    def _current_track_unlocked(self) -> Optional[Track]:
        if self._in_bounds_unlocked(self._cursor):
            return self._queue[self._cursor]
        return None

    def _step_unlocked(self, offset: int) -> PlaybackStatus:
        previous_cursor = self._cursor
        self._cursor += offset
        status = self.play()
        if not status.ok:
            self._cursor = previous_cursor
        return status

    def _transport_unlocked(
        self, action: str, call: Callable[[TrackSource], None]
    ) -> bool:
        """Run a transport call against the bound source.

        Returns:
            True if the source accepted the call
        """
        if self._source is None:
            log(f"Cannot {action}: no track source selected", level="warning")
            return False

        try:
            call(self._source)
        except TrackSourceError as e:
            logger.warning(f"Track source failed during {action}: {e}")
            log(f"❌ Cannot {action}: {e}", level="error")
            return False

        return True

    def _commit_state_unlocked(self, state: PlaybackState) -> None:
        self._state = state
        logger.debug(f"Playback state -> {state.value} (cursor={self._cursor})")
        for callback in list(self._subscribers.values()):
            self._deliver_unlocked(callback, state)

    def _deliver_unlocked(self, callback: StateCallback, state: PlaybackState) -> None:
        try:
            callback(state)
        except Exception:
            logger.exception(f"State subscriber failed while handling {state.value}")
