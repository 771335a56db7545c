from PIL import Image

from core.data_structures import CropInsets, SpriteConfig
from main import build_config, export_frames, main, parse_args

from conftest import make_grid_sheet


def test_rows_and_cols_imply_total_frames():
    config = build_config(parse_args(["sheet.png", "--rows", "2", "--cols", "3"]))
    assert (config.rows, config.cols, config.total_frames) == (2, 3, 6)


def test_overrides_apply_on_top_of_base():
    base = SpriteConfig(rows=4, cols=4, total_frames=16, fps=8)
    args = parse_args([
        "--exclude", "1,5", "--crop", "1,2,3,4", "--key", "#000000",
        "--tolerance", "20", "--auto-align", "--align", "bottom", "--fps", "24",
    ])
    config = build_config(args, base)
    assert config.rows == 4
    assert config.total_frames == 16
    assert config.excluded_frames == frozenset({1, 5})
    assert config.crop == CropInsets(1, 2, 3, 4)
    assert config.transparent == "#000000"
    assert config.tolerance == 20
    assert config.auto_align
    assert config.align_mode == "bottom"
    assert config.fps == 24


def test_export_writes_one_png_per_playable_frame(tmp_path):
    sheet_path = tmp_path / "sheet.png"
    make_grid_sheet(2, 2, 8, 8).save(sheet_path)
    out_dir = tmp_path / "frames"

    config = SpriteConfig(rows=2, cols=2, total_frames=4, excluded_frames={0}, scale=2)
    assert export_frames(str(sheet_path), config, str(out_dir)) == 3

    files = sorted(p.name for p in out_dir.iterdir())
    assert files == ["frame_0001_idx1.png", "frame_0002_idx2.png", "frame_0003_idx3.png"]
    with Image.open(out_dir / files[0]) as img:
        assert img.size == (16, 16)


def test_main_export_exit_codes(tmp_path):
    sheet_path = tmp_path / "sheet.png"
    make_grid_sheet(1, 2, 4, 4).save(sheet_path)
    out_dir = tmp_path / "out"
    assert main([str(sheet_path), "--cols", "2", "--export", str(out_dir)]) == 0
    assert len(list(out_dir.iterdir())) == 2

    assert main(["--export", str(out_dir)]) == 2
    assert main([str(sheet_path), "--crop", "1,2", "--export", str(out_dir)]) == 2


def test_no_auto_align_turns_off_loaded_setting():
    base = SpriteConfig(auto_align=True)
    assert build_config(parse_args(["--no-auto-align"]), base).auto_align is False
    assert build_config(parse_args([]), base).auto_align is True
    assert build_config(parse_args(["--auto-align"]), SpriteConfig()).auto_align is True
