"""
Hardware-facing module.

Provides the pointer-driver capability (real mouse and recording
backends) and the cooperative pause flag with its keyboard listener.
"""

from easel_printer.hardware.pause import PauseFlag, PauseListener
from easel_printer.hardware.pointer import (
    PointerDriver,
    PyAutoGUIPointer,
    RecordingPointer,
)

__all__ = [
    "PauseFlag",
    "PauseListener",
    "PointerDriver",
    "PyAutoGUIPointer",
    "RecordingPointer",
]
