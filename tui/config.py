# tui/config.py

import copy
import os
from typing import Any, Dict, Optional, Tuple

import yaml

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config.yaml")

# Cells taken by the frame drawn around the board, per axis.
FRAME = 2


def _merge(base: Dict[str, Any], override: Dict[str, Any], section: str = "") -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        name = f"{section}.{key}" if section else key
        if key not in base:
            raise ValueError(f"Unknown config key '{name}'")
        if isinstance(base[key], dict):
            if not isinstance(value, dict):
                raise ValueError(f"Config key '{name}' must be a mapping")
            merged[key] = _merge(base[key], value, name)
        else:
            merged[key] = value
    return merged


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the packaged defaults and, if `path` is given, merge that YAML file
    over them. Keys missing from the user file keep their default; unknown
    keys raise ValueError.
    """
    with open(DEFAULT_CONFIG_PATH, "r") as f:
        config = yaml.safe_load(f)

    if path is None:
        return config

    with open(path, "r") as f:
        user_config = yaml.safe_load(f) or {}
    if not isinstance(user_config, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return _merge(config, user_config)


def default_bombs(width: int, height: int, density: float) -> int:
    return int(round(width * height * density))


def clamp_dimensions(
    width: Optional[int],
    height: Optional[int],
    bombs: Optional[int],
    term_size: Tuple[int, int],
    density: float = 0.15,
) -> Tuple[int, int, int]:
    """
    Fill in missing board parameters from the terminal size and clamp all of
    them so the board fits inside the frame and keeps at least one safe cell.

    term_size is (columns, rows). Raises ValueError when the terminal cannot
    hold even a 1x1 board.
    """
    cols, rows = term_size
    max_width, max_height = cols - FRAME, rows - FRAME
    if max_width < 1 or max_height < 1:
        raise ValueError(f"Terminal of {cols}x{rows} is too small for a board")

    width = max_width if width is None else width
    height = max_height if height is None else height
    width = min(max(width, 1), max_width)
    height = min(max(height, 1), max_height)

    if bombs is None:
        bombs = default_bombs(width, height, density)
    bombs = min(max(bombs, 0), width * height - 1)
    return width, height, bombs
