"""
Utils module for the Sprite Sheet Previewer
Contains config file loading and settings persistence
"""

from .file_loader import (
    load_sprite_config,
    save_sprite_config,
    sprite_config_from_dict,
    sprite_config_to_dict
)

__all__ = [
    'load_sprite_config',
    'save_sprite_config',
    'sprite_config_from_dict',
    'sprite_config_to_dict',
]
