from pathlib import Path
import sys

import pytest
from PIL import Image

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from image_checker.main import main


def _write_image(path: Path, image_format: str, size=(40, 30)) -> Path:
    Image.new("RGB", size, (10, 20, 30)).save(path, format=image_format)
    return path


def test_cli_accepts_valid_images(tmp_path: Path, capsys) -> None:
    png = _write_image(tmp_path / "a.png", "PNG")
    jpeg = _write_image(tmp_path / "b.jpg", "JPEG")
    assert main([str(png), str(jpeg), "--locale", "en"]) == 0
    out = capsys.readouterr().out
    assert "Valid PNG image, 40x30 pixels" in out
    assert "Valid JPEG image, 40x30 pixels" in out


def test_cli_reports_failures(tmp_path: Path, capsys) -> None:
    png = _write_image(tmp_path / "wide.png", "PNG", size=(120, 30))
    bmp = _write_image(tmp_path / "c.bmp", "BMP")
    missing = tmp_path / "missing.png"
    code = main([str(png), str(bmp), str(missing), "--max-width", "100", "--locale", "en"])
    assert code == 1
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith("The image width of 120 pixels exceeds the maximum of 100 pixels.")
    assert lines[1].endswith("Unsupported image format. Only JPEG, PNG and GIF images are accepted.")
    assert lines[2].endswith("The file could not be read or is empty.")


@pytest.mark.parametrize(
    "flags",
    [["--max-width", "-1"], ["--min-height", "-3"], ["--timeout", "0"], ["--timeout", "-2.5"]],
)
def test_cli_rejects_out_of_range_flags(tmp_path: Path, capsys, flags) -> None:
    png = _write_image(tmp_path / "a.png", "PNG")
    with pytest.raises(SystemExit) as exc_info:
        main([str(png), *flags])
    assert exc_info.value.code == 2
    assert "invalid settings" in capsys.readouterr().err
