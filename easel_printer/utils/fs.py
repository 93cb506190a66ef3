"""YAML file helpers for the easel configuration.

``save_config`` rewrites ``easel.yaml`` through ``atomic_yaml_dump``: the
document goes to a sibling ``.tmp`` file, is fsynced, then renamed over
the target, so a reader sees either the old or the new layout.
"""

import os
from pathlib import Path
from typing import Any, Union

import yaml


def atomic_write_bytes(path: Union[str, Path], data: bytes) -> None:
    """Replace *path* with *data* atomically, creating parent directories.

    Raises
    ------
    RuntimeError
        If the write or rename fails; the temp file is removed.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    try:
        with open(tmp, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        tmp.replace(path)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise RuntimeError(f"Failed to write {path} atomically: {e}") from e


def atomic_yaml_dump(obj: Any, path: Union[str, Path]) -> None:
    """Write *obj* as block-style YAML, keeping key order."""
    text = yaml.safe_dump(obj, sort_keys=False, default_flow_style=None)
    atomic_write_bytes(path, text.encode("utf-8"))


def load_yaml(path: Union[str, Path]) -> Any:
    """Parse *path*; ``None`` for an empty document.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    yaml.YAMLError
        If the document is malformed.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Failed to parse YAML file {path}: {e}") from e
