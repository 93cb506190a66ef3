"""Pointer-driver capability and its backends.

The drawing engine never talks to a mouse library directly.  It is handed
a ``PointerDriver`` exposing three primitives -- ``move_to``, ``press``,
``release`` -- and the ``Easel`` adds the settle delay after each one.

Backends:
    PyAutoGUIPointer
        Drives the real system cursor through ``pyautogui``.  Imported
        lazily: ``pyautogui`` needs a display at import time.
    RecordingPointer
        Captures every primitive as a Gesture IR op.  Used by tests and by
        ``--dry-run`` to count strokes without touching the mouse.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from easel_printer.job_ir.operations import Gesture, MoveTo, Press, Release

logger = logging.getLogger(__name__)


class PointerDriver(ABC):
    """Synchronous pointer primitives in device-absolute pixels."""

    @abstractmethod
    def move_to(self, x: int, y: int) -> None:
        """Move the cursor to ``(x, y)``."""

    @abstractmethod
    def press(self, button: str = "left") -> None:
        """Press *button* at the current position."""

    @abstractmethod
    def release(self, button: str = "left") -> None:
        """Release *button* at the current position."""


class RecordingPointer(PointerDriver):
    """In-memory pointer that records gestures instead of moving anything."""

    def __init__(self) -> None:
        self.gestures: list[Gesture] = []

    def move_to(self, x: int, y: int) -> None:
        self.gestures.append(MoveTo(x=x, y=y))

    def press(self, button: str = "left") -> None:
        self.gestures.append(Press(button=button))

    def release(self, button: str = "left") -> None:
        self.gestures.append(Release(button=button))

    def clear(self) -> None:
        self.gestures.clear()


class PyAutoGUIPointer(PointerDriver):
    """System cursor backend.

    Parameters
    ----------
    failsafe : bool
        Keep pyautogui's corner fail-safe (slam the mouse into a screen
        corner to abort).  Enabled by default.
    """

    def __init__(self, failsafe: bool = True) -> None:
        import pyautogui

        self._gui = pyautogui
        # The easel applies its own settle delay after every primitive.
        pyautogui.PAUSE = 0
        pyautogui.MINIMUM_DURATION = 0
        pyautogui.FAILSAFE = failsafe
        logger.debug("pyautogui pointer ready (failsafe=%s)", failsafe)

    def move_to(self, x: int, y: int) -> None:
        self._gui.moveTo(x, y, _pause=False)

    def press(self, button: str = "left") -> None:
        self._gui.mouseDown(button=button, _pause=False)

    def release(self, button: str = "left") -> None:
        self._gui.mouseUp(button=button, _pause=False)
