import json

import pytest

from core.data_structures import CropInsets, SpriteConfig
from utils.file_loader import (
    load_sprite_config,
    save_sprite_config,
    sprite_config_from_dict,
)

EDITOR_CONFIG = {
    "rows": 4,
    "cols": 6,
    "totalFrames": 22,
    "excludedFrames": [3, 7],
    "readOrder": "column-major",
    "crop": {"left": 1, "top": 2, "right": 3, "bottom": 4},
    "scale": 2.5,
    "fps": 12,
    "transparent": "#ff00ff",
    "tolerance": 15,
    "autoAlign": True,
    "alignMode": "bottom",
}


def test_from_editor_dict():
    config = sprite_config_from_dict(EDITOR_CONFIG)
    assert config.rows == 4
    assert config.cols == 6
    assert config.total_frames == 22
    assert config.excluded_frames == frozenset({3, 7})
    assert config.read_order == "column-major"
    assert config.crop == CropInsets(1, 2, 3, 4)
    assert config.scale == 2.5
    assert config.transparent == "#ff00ff"
    assert config.auto_align is True
    assert config.align_mode == "bottom"


def test_defaults_fill_missing_keys():
    config = sprite_config_from_dict({"rows": 2, "cols": 3})
    assert config.total_frames == 6
    assert config.excluded_frames == frozenset()
    assert config.crop == CropInsets()
    assert config.transparent is None
    assert config.read_order == "row-major"
    assert config.align_mode == "center"


def test_empty_transparent_means_no_key():
    assert sprite_config_from_dict({"transparent": ""}).transparent is None


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"rows": "two"},
        {"rows": 2.5},
        {"fps": True},
        {"excludedFrames": "1,2"},
        {"excludedFrames": [1.5]},
        {"crop": [1, 2, 3, 4]},
        {"transparent": 255},
    ],
)
def test_wrong_types_raise(data):
    with pytest.raises(ValueError):
        sprite_config_from_dict(data)


def test_load_and_save(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(EDITOR_CONFIG))
    config = load_sprite_config(str(path))
    assert config == sprite_config_from_dict(EDITOR_CONFIG)

    out = tmp_path / "saved.json"
    assert save_sprite_config(config, str(out))
    assert load_sprite_config(str(out)) == config


def test_load_failures_return_none(tmp_path):
    assert load_sprite_config(str(tmp_path / "missing.json")) is None
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    assert load_sprite_config(str(bad)) is None
    wrong = tmp_path / "wrong.json"
    wrong.write_text(json.dumps({"rows": "x"}))
    assert load_sprite_config(str(wrong)) is None


def test_configs_are_hashable():
    assert hash(SpriteConfig()) == hash(SpriteConfig())
