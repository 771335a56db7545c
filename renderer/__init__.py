"""
Renderer module for the Sprite Sheet Previewer
Composites preview frames from a sheet and a sprite config
"""

from .preview_renderer import PreviewRenderer, TickResult

__all__ = [
    'PreviewRenderer',
    'TickResult',
]
