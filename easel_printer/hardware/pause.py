"""Cooperative pause flag and the keyboard listener that toggles it.

The drawing loop is never interrupted mid-gesture.  It polls the flag at
checkpoints (between pixels and between strokes) and blocks there while
the flag is set, then resumes exactly where it left off.

The listener runs on pynput's own thread and only ever touches the flag;
canvas state stays owned by the drawing thread.

Hotkey: releasing **Left Ctrl + Space** after holding both toggles pause.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any

logger = logging.getLogger(__name__)

# pynput ``Key`` member names; character keys fall back to their char.
HOTKEY = frozenset({"ctrl_l", "space"})


def _key_name(key: Any) -> str:
    name = getattr(key, "name", None)
    if name is None:
        name = getattr(key, "char", None) or str(key)
    return name


class PauseFlag:
    """Thread-safe pause toggle with a blocking checkpoint."""

    def __init__(self) -> None:
        self._paused = threading.Event()

    @property
    def is_paused(self) -> bool:
        return self._paused.is_set()

    def pause(self) -> None:
        self._paused.set()

    def resume(self) -> None:
        self._paused.clear()

    def toggle(self) -> bool:
        """Flip the flag and return the new paused state."""
        if self._paused.is_set():
            self._paused.clear()
            return False
        self._paused.set()
        return True

    def wait_while_paused(self, poll_s: float = 0.05) -> None:
        """Block the caller until the flag is cleared.

        Returns immediately when not paused.
        """
        if not self._paused.is_set():
            return
        logger.info("Pausing printing.")
        while self._paused.is_set():
            time.sleep(poll_s)
        logger.info("Resuming printing.")


class PauseListener:
    """Global keyboard hook toggling a ``PauseFlag`` on Left Ctrl + Space.

    Parameters
    ----------
    flag : PauseFlag
        Flag to toggle.

    Examples
    --------
    >>> flag = PauseFlag()
    >>> with PauseListener(flag):
    ...     session.print_image(image)
    """

    def __init__(self, flag: PauseFlag) -> None:
        self.flag = flag
        self._held: set[str] = set()
        self._armed = False
        self._listener: Any = None

    # ------------------------------------------------------------------
    # Key handling (pure; exercised directly by tests)
    # ------------------------------------------------------------------

    def on_press(self, key: Any) -> None:
        self._held.add(_key_name(key))
        if HOTKEY <= self._held:
            self._armed = True

    def on_release(self, key: Any) -> None:
        self._held.discard(_key_name(key))
        if self._armed:
            self._armed = False
            paused = self.flag.toggle()
            logger.info("Pause hotkey: %s", "paused" if paused else "resumed")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        from pynput import keyboard

        self._listener = keyboard.Listener(
            on_press=self.on_press, on_release=self.on_release,
        )
        self._listener.daemon = True
        self._listener.start()
        logger.info("Press Left Control + Space to pause drawing.")

    def stop(self) -> None:
        if self._listener is not None:
            self._listener.stop()
            self._listener = None

    def __enter__(self) -> PauseListener:
        self.start()
        return self

    def __exit__(self, *exc: object) -> None:
        self.stop()
