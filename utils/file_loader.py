"""
File Loader
Utilities for loading and saving sprite configs as JSON
"""

import json
from typing import Any, Dict, Optional

from core.data_structures import AlignMode, CropInsets, ReadOrder, SpriteConfig


def _number(data: Dict[str, Any], key: str, default: float) -> float:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{key}' must be a number, got {value!r}")
    return value


def _integer(data: Dict[str, Any], key: str, default: int) -> int:
    value = _number(data, key, default)
    if int(value) != value:
        raise ValueError(f"'{key}' must be a whole number, got {value!r}")
    return int(value)


def sprite_config_from_dict(data: Dict[str, Any]) -> SpriteConfig:
    """
    Build a SpriteConfig from the editor's camelCase JSON shape

    Missing keys take the defaults. Values are not range-checked here;
    out-of-range geometry, fps or scale render as the idle state.

    Raises:
        ValueError: A value has the wrong type
    """
    if not isinstance(data, dict):
        raise ValueError("Sprite config must be a JSON object")

    rows = _integer(data, 'rows', 1)
    cols = _integer(data, 'cols', 1)
    total_frames = _integer(data, 'totalFrames', rows * cols)

    excluded = data.get('excludedFrames', [])
    if not isinstance(excluded, (list, tuple)):
        raise ValueError("'excludedFrames' must be a list")
    excluded_frames = set()
    for value in excluded:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Excluded frame {value!r} is not an integer")
        excluded_frames.add(value)

    crop_data = data.get('crop') or {}
    if not isinstance(crop_data, dict):
        raise ValueError("'crop' must be an object")
    crop = CropInsets(
        left=_number(crop_data, 'left', 0),
        top=_number(crop_data, 'top', 0),
        right=_number(crop_data, 'right', 0),
        bottom=_number(crop_data, 'bottom', 0),
    )

    transparent = data.get('transparent') or None
    if transparent is not None and not isinstance(transparent, str):
        raise ValueError("'transparent' must be a color string")

    return SpriteConfig(
        rows=rows,
        cols=cols,
        total_frames=total_frames,
        excluded_frames=frozenset(excluded_frames),
        read_order=str(data.get('readOrder', ReadOrder.ROW_MAJOR)),
        crop=crop,
        scale=_number(data, 'scale', 1.0),
        fps=_number(data, 'fps', 10.0),
        transparent=transparent,
        tolerance=_number(data, 'tolerance', 0.0),
        auto_align=bool(data.get('autoAlign', False)),
        align_mode=str(data.get('alignMode', AlignMode.CENTER)),
    )


def sprite_config_to_dict(config: SpriteConfig) -> Dict[str, Any]:
    """Inverse of sprite_config_from_dict"""
    return {
        'rows': config.rows,
        'cols': config.cols,
        'totalFrames': config.total_frames,
        'excludedFrames': sorted(config.excluded_frames),
        'readOrder': config.read_order,
        'crop': {
            'left': config.crop.left,
            'top': config.crop.top,
            'right': config.crop.right,
            'bottom': config.crop.bottom,
        },
        'scale': config.scale,
        'fps': config.fps,
        'transparent': config.transparent,
        'tolerance': config.tolerance,
        'autoAlign': config.auto_align,
        'alignMode': config.align_mode,
    }


def load_sprite_config(json_path: str) -> Optional[SpriteConfig]:
    """
    Load a sprite config from a JSON file

    Args:
        json_path: Path to the JSON file

    Returns:
        SpriteConfig, or None if the file could not be read or parsed
    """
    try:
        with open(json_path, 'r') as f:
            data = json.load(f)
        return sprite_config_from_dict(data)
    except Exception as e:
        print(f"Error loading sprite config: {e}")
        return None


def save_sprite_config(config: SpriteConfig, json_path: str) -> bool:
    """Write a sprite config to a JSON file"""
    try:
        with open(json_path, 'w') as f:
            json.dump(sprite_config_to_dict(config), f, indent=2)
        return True
    except OSError as e:
        print(f"Error saving sprite config: {e}")
        return False
