"""
Settings Manager
Handles application settings persistence
"""

import json
from typing import Optional

from PyQt6.QtCore import QSettings

from core.data_structures import SpriteConfig
from .file_loader import sprite_config_from_dict, sprite_config_to_dict


class SettingsManager:
    """Manages application settings"""

    def __init__(self, settings: Optional[QSettings] = None):
        self.settings = settings or QSettings('SpriteSheetPreviewer', 'Settings')

    def get_last_sheet(self) -> str:
        """Get the last opened sheet"""
        return self.settings.value('last_sheet', '', type=str)

    def set_last_sheet(self, path: str):
        """Save the last opened sheet"""
        self.settings.setValue('last_sheet', path)

    def get_sprite_config(self) -> Optional[SpriteConfig]:
        """Get the last used sprite config, or None if none was saved"""
        blob = self.settings.value('sprite_config', '', type=str)
        if not blob:
            return None
        try:
            return sprite_config_from_dict(json.loads(blob))
        except ValueError as e:
            print(f"Ignoring saved sprite config: {e}")
            return None

    def set_sprite_config(self, config: SpriteConfig):
        """Save the sprite config"""
        self.settings.setValue('sprite_config', json.dumps(sprite_config_to_dict(config)))

    def get_window_geometry(self):
        """Get saved window geometry"""
        return self.settings.value('window_geometry')

    def set_window_geometry(self, geometry):
        """Save window geometry"""
        self.settings.setValue('window_geometry', geometry)
