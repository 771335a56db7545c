"""
UI module for the Sprite Sheet Previewer
Contains all Qt widgets and UI components
"""

from .log_widget import LogWidget
from .preview_widget import PreviewWidget
from .main_window import SpritePreviewWindow

__all__ = [
    'LogWidget',
    'PreviewWidget',
    'SpritePreviewWindow',
]
