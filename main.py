"""
Sprite Sheet Previewer
Main entry point for the application

Loops a sprite sheet as an animation in a preview window, or exports the
composited frames headlessly with --export.
"""

import argparse
import os
import sys
from dataclasses import replace
from typing import List, Optional

from core.data_structures import AlignMode, CropInsets, ReadOrder, SpriteConfig
from core.sprite_sheet import SpriteSheet
from renderer.preview_renderer import PreviewRenderer
from utils.file_loader import load_sprite_config


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Preview a sprite sheet as a looping animation")
    ap.add_argument("sheet", nargs="?", help="path to the sprite sheet image")
    ap.add_argument("--config", help="sprite config JSON")
    ap.add_argument("--rows", type=int)
    ap.add_argument("--cols", type=int)
    ap.add_argument("--frames", type=int, help="total frames, defaults to rows*cols")
    ap.add_argument("--exclude", help="comma separated frame indices to skip")
    ap.add_argument("--read-order", choices=[ReadOrder.ROW_MAJOR, ReadOrder.COLUMN_MAJOR])
    ap.add_argument("--crop", help="left,top,right,bottom insets in pixels")
    ap.add_argument("--scale", type=float)
    ap.add_argument("--fps", type=float)
    ap.add_argument("--key", help='key color treated as background, e.g. "#ff00ff"')
    ap.add_argument("--tolerance", type=float, help="key color tolerance, 0-100")
    ap.add_argument("--auto-align", action=argparse.BooleanOptionalAction, default=None)
    ap.add_argument("--align", choices=[AlignMode.CENTER, AlignMode.BOTTOM])
    ap.add_argument("--export", metavar="DIR", help="write one PNG per frame and exit")
    return ap.parse_args(argv)


def _int_list(text: str) -> List[int]:
    return [int(part) for part in text.split(",") if part.strip()]


def build_config(args: argparse.Namespace, base: Optional[SpriteConfig] = None) -> SpriteConfig:
    """Apply command line overrides on top of a base config"""
    config = base or SpriteConfig()
    changes = {}
    if args.rows is not None:
        changes['rows'] = args.rows
    if args.cols is not None:
        changes['cols'] = args.cols
    if args.frames is not None:
        changes['total_frames'] = args.frames
    elif args.rows is not None or args.cols is not None:
        changes['total_frames'] = changes.get('rows', config.rows) * changes.get('cols', config.cols)
    if args.exclude:
        changes['excluded_frames'] = frozenset(_int_list(args.exclude))
    if args.read_order:
        changes['read_order'] = args.read_order
    if args.crop:
        values = [float(part) for part in args.crop.split(",")]
        if len(values) != 4:
            raise ValueError("--crop needs four values: left,top,right,bottom")
        changes['crop'] = CropInsets(*values)
    if args.scale is not None:
        changes['scale'] = args.scale
    if args.fps is not None:
        changes['fps'] = args.fps
    if args.key is not None:
        changes['transparent'] = args.key or None
    if args.tolerance is not None:
        changes['tolerance'] = args.tolerance
    if args.auto_align is not None:
        changes['auto_align'] = args.auto_align
    if args.align:
        changes['align_mode'] = args.align
    return replace(config, **changes)


def export_frames(sheet_path: str, config: SpriteConfig, out_dir: str) -> int:
    """Render every playable frame to out_dir; returns the number written"""
    sheet = SpriteSheet()
    if not sheet.load(sheet_path):
        return 0
    os.makedirs(out_dir, exist_ok=True)
    renderer = PreviewRenderer()
    written = 0
    for result in renderer.render_sequence(sheet.image, config, sheet.dimensions):
        name = f"frame_{result.display_index:04d}_idx{result.frame_index}.png"
        result.image.save(os.path.join(out_dir, name))
        written += 1
    return written


def run_gui(args: argparse.Namespace, config: Optional[SpriteConfig]) -> int:
    from PyQt6.QtWidgets import QApplication
    from ui.main_window import SpritePreviewWindow

    app = QApplication(sys.argv)
    app.setStyle('Fusion')

    window = SpritePreviewWindow()
    if config is not None:
        window.apply_config(config)
    if args.sheet:
        window.open_sheet(args.sheet)
    window.show()

    return app.exec()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = parse_args(argv)

    base = None
    if args.config:
        base = load_sprite_config(args.config)
        if base is None:
            return 1

    overrides_given = any(
        value is not None
        for key, value in vars(args).items()
        if key not in ('sheet', 'config', 'export')
    )
    try:
        config = build_config(args, base) if (base or overrides_given) else None
    except ValueError as e:
        print(f"Error: {e}")
        return 2

    if args.export:
        if not args.sheet:
            print("Error: --export needs a sheet")
            return 2
        written = export_frames(args.sheet, config or SpriteConfig(), args.export)
        print(f"Wrote {written} frames to {args.export}")
        return 0 if written else 1

    return run_gui(args, config)


if __name__ == '__main__':
    sys.exit(main())
