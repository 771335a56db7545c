"""
Preview Widget
Runs the per-tick preview loop and shows the composite with playback controls
"""

from typing import Callable, Optional

from PIL import Image
from PyQt6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel
from PyQt6.QtCore import QTimer, QRectF, pyqtSignal
from PyQt6.QtGui import QPainter, QPixmap, QImage, QColor, QPen

from core.data_structures import AlignMode, ImageDimensions, SpriteConfig
from core.frame_sequence import frame_sequence_for
from core.scheduler import FrameScheduler
from renderer.preview_renderer import PreviewRenderer, TickResult

# One tick per refresh at ~60 Hz
TICK_INTERVAL_MS = 16


def pil_to_pixmap(image: Image.Image) -> Optional[QPixmap]:
    """Convert an RGBA Pillow image to a QPixmap"""
    width, height = image.size
    if width <= 0 or height <= 0:
        return None
    buffer = image.tobytes("raw", "BGRA")
    qimage = QImage(buffer, width, height, QImage.Format.Format_ARGB32)
    return QPixmap.fromImage(qimage.copy())


class PreviewCanvas(QWidget):
    """Draws the latest composite, fitted to the widget without smoothing"""

    MAX_DISPLAY_HEIGHT = 300

    def __init__(self, parent=None):
        super().__init__(parent)
        self._pixmap: Optional[QPixmap] = None
        self.show_guides: bool = False
        self.align_mode: str = AlignMode.CENTER
        self.background_color = QColor(30, 41, 59)
        self.setMinimumHeight(200)

    def set_pixmap(self, pixmap: Optional[QPixmap]):
        self._pixmap = pixmap
        self.update()

    def clear(self):
        self.set_pixmap(None)

    def _target_rect(self) -> QRectF:
        pw = self._pixmap.width()
        ph = self._pixmap.height()
        ratio = min(
            1.0,
            self.width() / pw,
            min(self.height(), self.MAX_DISPLAY_HEIGHT) / ph,
        )
        w = pw * ratio
        h = ph * ratio
        return QRectF((self.width() - w) / 2, (self.height() - h) / 2, w, h)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), self.background_color)
        if self._pixmap is not None and not self._pixmap.isNull():
            painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform, False)
            painter.drawPixmap(self._target_rect(), self._pixmap, QRectF(self._pixmap.rect()))

        if self.show_guides:
            red = QColor(239, 68, 68, 60)
            painter.setPen(QPen(red, 1))
            cx = self.width() // 2
            painter.drawLine(cx, 0, cx, self.height())
            if self.align_mode == AlignMode.CENTER:
                cy = self.height() // 2
                painter.drawLine(0, cy, self.width(), cy)
            else:
                painter.setPen(QPen(QColor(59, 130, 246, 60), 1))
                by = self.height() - 32
                painter.drawLine(0, by, self.width(), by)
        painter.end()


class PreviewWidget(QWidget):
    """
    Sprite sheet preview player

    Ticks are cooperative: a single-shot timer requests the next tick only
    after the current composite is shown, and never while paused. Changing
    the sheet, the config or the play state cancels the pending tick and
    restarts the loop so the next tick reads the current inputs.
    """

    frame_changed = pyqtSignal(int, int)
    playback_state_changed = pyqtSignal(bool)

    def __init__(self, parent=None, clock: Optional[Callable[[], float]] = None):
        super().__init__(parent)

        self.renderer = PreviewRenderer()
        self.scheduler = FrameScheduler(clock)
        self.sheet_image: Optional[Image.Image] = None
        self.dimensions = ImageDimensions()
        self.config = SpriteConfig()
        self.last_result: Optional[TickResult] = None

        self._tick_timer = QTimer(self)
        self._tick_timer.setSingleShot(True)
        self._tick_timer.timeout.connect(self._on_tick)

        self.init_ui()
        self._update_controls()

    def init_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.canvas = PreviewCanvas()
        layout.addWidget(self.canvas, stretch=1)

        controls = QHBoxLayout()
        controls.addStretch()
        self.play_button = QPushButton()
        self.play_button.setFixedWidth(80)
        self.play_button.clicked.connect(self.toggle_playback)
        controls.addWidget(self.play_button)

        self.frame_label = QLabel()
        self.frame_label.setStyleSheet("font-family: monospace; color: #94a3b8;")
        controls.addWidget(self.frame_label)
        controls.addStretch()
        layout.addLayout(controls)

    # ------------------------------------------------------------------ #
    # Inputs
    # ------------------------------------------------------------------ #
    def set_sheet(self, image: Optional[Image.Image], dimensions: Optional[ImageDimensions] = None):
        """Swap the sheet image; None unloads it"""
        self.sheet_image = image
        if dimensions is None:
            dimensions = ImageDimensions(image.width, image.height) if image is not None else ImageDimensions()
        self.dimensions = dimensions
        if image is None:
            self.canvas.clear()
        self._restart_loop()

    def set_config(self, config: SpriteConfig):
        self.config = config
        self.canvas.show_guides = config.auto_align
        self.canvas.align_mode = config.align_mode
        self._restart_loop()

    def set_playing(self, playing: bool):
        if playing == self.scheduler.playing:
            return
        if playing:
            self.scheduler.resume()
        else:
            self.scheduler.pause()
        self.playback_state_changed.emit(playing)
        self._restart_loop()

    def toggle_playback(self):
        self.set_playing(not self.scheduler.playing)

    # ------------------------------------------------------------------ #
    # Tick loop
    # ------------------------------------------------------------------ #
    def _restart_loop(self):
        self._tick_timer.stop()
        self._update_controls()
        if self.scheduler.playing:
            self._tick_timer.start(0)

    def _on_tick(self):
        """Render one composite from the current inputs, then request the next"""
        result = self.render_now()
        if result is not None:
            self.canvas.set_pixmap(pil_to_pixmap(result.image))
        self._update_controls()
        if self.scheduler.playing and self.isVisible():
            self._tick_timer.start(TICK_INTERVAL_MS)

    def render_now(self) -> Optional[TickResult]:
        """Render the frame for the current clock time, or None when idle"""
        now = self.scheduler.now()
        if self.scheduler.advance(frame_sequence_for(self.config), self.config.fps, now) is None:
            return None
        result = self.renderer.render_tick(
            self.sheet_image,
            self.config,
            self.dimensions,
            now,
        )
        self.last_result = result
        if result is not None:
            self.frame_changed.emit(result.display_index, result.sequence_length)
        return result

    def shutdown(self):
        """Cancel any pending tick before the canvas goes away"""
        self._tick_timer.stop()

    def showEvent(self, event):
        super().showEvent(event)
        self._restart_loop()

    def hideEvent(self, event):
        self.shutdown()
        super().hideEvent(event)

    def closeEvent(self, event):
        self.shutdown()
        super().closeEvent(event)

    def _update_controls(self):
        state = self.scheduler.state
        self.play_button.setText("Pause" if state.is_playing else "Play")
        state.sequence_length = len(frame_sequence_for(self.config))
        self.frame_label.setText(state.counter_text())
