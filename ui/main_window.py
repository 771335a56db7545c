"""
Main Window
The main application window that ties the sheet, config, preview and log together
"""

import os
from typing import Optional

from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QFileDialog, QCheckBox, QSplitter
)
from PyQt6.QtCore import Qt

from core.data_structures import SpriteConfig
from core.frame_sequence import frame_sequence_for
from core.sprite_sheet import SpriteSheet
from utils.file_loader import load_sprite_config, save_sprite_config
from utils.settings import SettingsManager
from .log_widget import LogWidget
from .preview_widget import PreviewWidget

IMAGE_FILTER = "Images (*.png *.gif *.bmp *.webp *.jpg *.jpeg *.avif *.heic);;All Files (*)"
CONFIG_FILTER = "Sprite Config (*.json);;All Files (*)"


class SpritePreviewWindow(QMainWindow):
    """Main application window"""

    def __init__(self, settings: Optional[SettingsManager] = None):
        super().__init__()
        self.setWindowTitle("Sprite Sheet Previewer")
        self.resize(720, 560)

        self.settings = settings or SettingsManager()
        self.sheet = SpriteSheet()
        self.config: SpriteConfig = self.settings.get_sprite_config() or SpriteConfig()

        self.init_ui()
        self.preview.set_config(self.config)

        geometry = self.settings.get_window_geometry()
        if geometry:
            self.restoreGeometry(geometry)

    def init_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)

        toolbar_layout = QHBoxLayout()
        open_btn = QPushButton("Open Sheet")
        open_btn.clicked.connect(self.choose_sheet)
        toolbar_layout.addWidget(open_btn)

        load_cfg_btn = QPushButton("Load Config")
        load_cfg_btn.clicked.connect(self.choose_config)
        toolbar_layout.addWidget(load_cfg_btn)

        save_cfg_btn = QPushButton("Save Config")
        save_cfg_btn.clicked.connect(self.choose_config_destination)
        toolbar_layout.addWidget(save_cfg_btn)

        self.diagnostics_check = QCheckBox("Tick diagnostics")
        self.diagnostics_check.toggled.connect(self.set_diagnostics_enabled)
        toolbar_layout.addWidget(self.diagnostics_check)

        toolbar_layout.addStretch()
        self.sheet_label = QLabel("No sheet loaded")
        toolbar_layout.addWidget(self.sheet_label)
        main_layout.addLayout(toolbar_layout)

        self.preview = PreviewWidget()
        self.log_widget = LogWidget()

        splitter = QSplitter(Qt.Orientation.Vertical)
        splitter.addWidget(self.preview)
        splitter.addWidget(self.log_widget)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 1)
        splitter.setCollapsible(1, True)
        main_layout.addWidget(splitter, stretch=1)

        self.log_widget.log("Application started", "INFO")

    # ------------------------------------------------------------------ #
    # Sheet / config
    # ------------------------------------------------------------------ #
    def choose_sheet(self):
        start_dir = os.path.dirname(self.settings.get_last_sheet())
        path, _ = QFileDialog.getOpenFileName(self, "Open Sprite Sheet", start_dir, IMAGE_FILTER)
        if path:
            self.open_sheet(path)

    def open_sheet(self, path: str) -> bool:
        if not self.sheet.load(path):
            self.log_widget.log(f"Could not load sheet: {path}", "ERROR")
            return False
        dims = self.sheet.dimensions
        self.preview.set_sheet(self.sheet.image, dims)
        self.settings.set_last_sheet(path)
        self.sheet_label.setText(f"{os.path.basename(path)} ({dims.width}x{dims.height})")
        self.log_widget.log(f"Loaded sheet {os.path.basename(path)} ({dims.width}x{dims.height})", "SUCCESS")
        self._warn_on_uneven_grid()
        return True

    def choose_config(self):
        path, _ = QFileDialog.getOpenFileName(self, "Load Sprite Config", "", CONFIG_FILTER)
        if not path:
            return
        config = load_sprite_config(path)
        if config is None:
            self.log_widget.log(f"Could not load config: {path}", "ERROR")
            return
        self.apply_config(config)
        self.log_widget.log(f"Loaded config {os.path.basename(path)}", "SUCCESS")

    def choose_config_destination(self):
        path, _ = QFileDialog.getSaveFileName(self, "Save Sprite Config", "sprite_config.json", CONFIG_FILTER)
        if not path:
            return
        if save_sprite_config(self.config, path):
            self.log_widget.log(f"Saved config to {path}", "SUCCESS")
        else:
            self.log_widget.log(f"Could not save config to {path}", "ERROR")

    def apply_config(self, config: SpriteConfig):
        self.config = config
        self.preview.set_config(config)
        self.settings.set_sprite_config(config)
        length = len(frame_sequence_for(config))
        if length == 0:
            self.log_widget.log("No playable frames with this config", "WARNING")
        else:
            self.log_widget.log(
                f"{config.rows}x{config.cols} grid, {length} playable frames at {config.fps:g} fps",
                "INFO"
            )
        if config.fps <= 0 or config.scale <= 0:
            self.log_widget.log("fps and scale must be positive; preview is idle", "WARNING")
        self._warn_on_uneven_grid()

    def _warn_on_uneven_grid(self):
        dims = self.sheet.dimensions
        if dims.is_empty or self.config.rows <= 0 or self.config.cols <= 0:
            return
        if dims.width % self.config.cols or dims.height % self.config.rows:
            self.log_widget.log(
                f"Sheet {dims.width}x{dims.height} does not divide into "
                f"{self.config.rows}x{self.config.cols} cells; frames will be fractional",
                "WARNING"
            )

    def set_diagnostics_enabled(self, enabled: bool):
        renderer = self.preview.renderer
        renderer.enable_logging = enabled
        if enabled:
            self.log_widget.log("Tick diagnostics enabled", "INFO")
            return
        entries = renderer.clear_log()
        self.log_widget.log(f"Tick diagnostics disabled, {len(entries)} ticks recorded", "INFO")
        if entries:
            last = entries[-1]
            rect = last['source_rect']
            self.log_widget.log(
                f"Last tick: frame {last['frame_index']} at "
                f"({rect.x:g}, {rect.y:g}) {rect.width:g}x{rect.height:g}, bbox {last['bbox']}",
                "INFO"
            )

    def closeEvent(self, event):
        """Handle window close"""
        self.preview.shutdown()
        self.settings.set_window_geometry(self.saveGeometry())
        self.settings.set_sprite_config(self.config)
        event.accept()
