import io
import os
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from conftest import CLEAR, YELLOW, YELLOW_HALF, read_pixels, rgba_array
from replace_color.controllers.app_controller import AppController
from replace_color.models.color_model import ColorTuple, unpack
from replace_color.models.report_model import FileStatus
from replace_color.models.run_config import RunConfig
from replace_color.ui.console_view import ConsoleView


def make_config(directory: Path, show_colors: bool = False, to_color: int = 0xFFFF0080) -> RunConfig:
    return RunConfig(
        directory=directory,
        filename_suffix=".png",
        from_color=unpack(0xFFFF00FF),
        to_color=unpack(to_color),
        show_colors=show_colors,
    )


def test_example_pixel_is_converted_and_file_rewritten(tmp_path, write_image):
    path = write_image("sprite.png", rgba_array([[YELLOW, CLEAR], [CLEAR, CLEAR]]))

    report = AppController(config=make_config(tmp_path)).process_file(path)

    assert report.status is FileStatus.CONVERTED
    assert report.touched
    assert report.converted_pixels == 1
    assert (report.width, report.height, report.channels, report.mode) == (2, 2, 4, "RGBA")
    pixels = read_pixels(path)
    assert tuple(pixels[0, 0]) == YELLOW_HALF
    assert tuple(pixels[1, 1]) == CLEAR


def test_file_without_match_is_not_rewritten(tmp_path, write_image):
    path = write_image("plain.png", rgba_array([[CLEAR, CLEAR]]))
    os.utime(path, (1_000_000, 1_000_000))
    before = path.read_bytes()

    report = AppController(config=make_config(tmp_path)).process_file(path)

    assert report.status is FileStatus.UNCHANGED
    assert report.converted_pixels == 0
    assert path.read_bytes() == before
    assert path.stat().st_mtime == 1_000_000


@pytest.mark.parametrize(
    "mode, pixels",
    [
        ("L", np.full((2, 2), 0xFF, dtype=np.uint8)),
        ("RGB", np.full((2, 2, 3), 0xFF, dtype=np.uint8)),
    ],
)
def test_wrong_channel_count_is_skipped_and_untouched(tmp_path, write_image, mode, pixels):
    path = write_image(f"img_{mode}.png", pixels, mode=mode)
    before = path.read_bytes()

    report = AppController(config=make_config(tmp_path)).process_file(path)

    assert report.status is FileStatus.WRONG_CHANNELS
    assert report.converted_pixels == 0
    assert path.read_bytes() == before


def test_unreadable_file_is_reported_not_raised(tmp_path):
    path = tmp_path / "corrupt.png"
    path.write_bytes(b"\x89PNG garbage")

    report = AppController(config=make_config(tmp_path)).process_file(path)

    assert report.status is FileStatus.UNREADABLE
    assert not report.decoded
    assert report.error


def test_write_failure_is_reported_and_not_counted(tmp_path, write_image, monkeypatch):
    path = write_image("sprite.png", rgba_array([[YELLOW]]))
    controller = AppController(config=make_config(tmp_path))

    def fail(image_data):
        raise OSError("disk full")

    monkeypatch.setattr(controller._image_service, "save_image", fail)
    report = controller.process_file(path)

    assert report.status is FileStatus.WRITE_FAILED
    assert report.converted_pixels == 1
    assert not report.touched
    assert tuple(read_pixels(path)[0, 0]) == YELLOW


def test_show_colors_collects_sorted_colors(tmp_path, write_image):
    blue = (0x00, 0x00, 0xFF, 0xFF)
    path = write_image("sprite.png", rgba_array([[YELLOW, blue, CLEAR]]))

    report = AppController(config=make_config(tmp_path, show_colors=True)).process_file(path)

    assert report.colors_found == (ColorTuple(*CLEAR), ColorTuple(*blue), ColorTuple(*YELLOW_HALF))


def test_run_folds_totals_and_second_run_is_a_no_op(tmp_path, write_image):
    write_image("a.png", rgba_array([[YELLOW, YELLOW]]))
    write_image("nested/b.png", rgba_array([[YELLOW, CLEAR]]))
    write_image("nested/c.png", rgba_array([[CLEAR, CLEAR]]))
    write_image("nested/rgb.png", np.full((1, 2, 3), 0xFF, dtype=np.uint8), mode="RGB")
    (tmp_path / "broken.png").write_bytes(b"nope")
    write_image("ignored.tiff", rgba_array([[YELLOW]]))

    first = AppController(config=make_config(tmp_path)).run()

    assert first.files_found == 5
    assert first.pixels_converted == 3
    assert first.files_touched == 2
    assert first.files_unreadable == 1
    assert first.files_skipped == 1
    assert tuple(read_pixels(tmp_path / "ignored.tiff")[0, 0]) == YELLOW

    second = AppController(config=make_config(tmp_path)).run()

    assert second.pixels_converted == 0
    assert second.files_touched == 0


def test_same_source_and_target_still_counts_matches(tmp_path, write_image):
    write_image("a.png", rgba_array([[YELLOW]]))
    config = make_config(tmp_path, to_color=0xFFFF00FF)

    first = AppController(config=config).run()
    second = AppController(config=config).run()

    assert first.pixels_converted == second.pixels_converted == 1


def test_run_writes_report_through_view(tmp_path, write_image):
    path = write_image("a.png", rgba_array([[YELLOW, CLEAR]]))
    out = io.StringIO()

    AppController(config=make_config(tmp_path, show_colors=True), view=ConsoleView(out)).run()

    lines = out.getvalue().splitlines()
    assert lines[0] == "Converting from : RGBA = (0xff, 0xff, 0x00, 0xff)"
    assert lines[1] == "             to : RGBA = (0xff, 0xff, 0x00, 0x80)"
    assert lines[2] == "  Searching for : *.png"
    assert lines[3] == f"             in : {tmp_path}"
    assert lines[4] == "Found 1 files, now converting ..."
    assert lines[5] == (
        f"Processing {path}, width = 2, height = 1, channels = 4, mode = RGBA: converted 1 pixels"
        ", colors found: RGBA = (0x00, 0x00, 0x00, 0x00), RGBA = (0xff, 0xff, 0x00, 0x80)"
    )
    assert lines[6] == ""
    assert lines[7] == "Converted a total of 1 pixels in 1 files"


def test_decoder_crash_on_one_file_does_not_stop_the_run(tmp_path, write_image, monkeypatch):
    corrupt = tmp_path / "a_corrupt.png"
    corrupt.write_bytes(b"qoif\x00\x00\x00\x10\x00\x00\x00\x10\x04\x00garbage")
    good = write_image("b_good.png", rgba_array([[YELLOW]]))
    real_open = Image.open

    def open_or_crash(fp, *args, **kwargs):
        if Path(fp).name == corrupt.name:
            raise IndexError("index out of range")
        return real_open(fp, *args, **kwargs)

    monkeypatch.setattr(Image, "open", open_or_crash)
    out = io.StringIO()

    totals = AppController(config=make_config(tmp_path), view=ConsoleView(out)).run()

    assert totals.files_unreadable == 1
    assert totals.files_touched == 1
    assert tuple(read_pixels(good)[0, 0]) == YELLOW_HALF
    assert f"Processing {corrupt} - unable to read, skipping..." in out.getvalue()


def test_cmyk_image_is_skipped_and_untouched(tmp_path, write_image):
    path = write_image("print.tiff", np.zeros((1, 2, 4), dtype=np.uint8), mode="CMYK")
    before = path.read_bytes()

    report = AppController(config=make_config(tmp_path)).process_file(path)

    assert report.status is FileStatus.WRONG_CHANNELS
    assert (report.channels, report.mode) == (4, "CMYK")
    assert path.read_bytes() == before


def test_transparent_palette_png_is_converted(tmp_path):
    path = tmp_path / "sprite.png"
    img = Image.new("P", (2, 1))
    img.putpalette([0, 0, 0, 0xFF, 0xFF, 0x00])
    img.putpixel((0, 0), 1)
    img.save(path, transparency=0)

    report = AppController(config=make_config(tmp_path)).process_file(path)

    assert report.status is FileStatus.CONVERTED
    assert report.converted_pixels == 1
    pixels = read_pixels(path)
    assert tuple(pixels[0, 0]) == YELLOW_HALF
    assert tuple(pixels[0, 1]) == CLEAR
