import logging

import pytest
from PIL import Image as PILImage

from raytrace.main import gradient_colour, main, render_gradient, vector_walkthrough


def test_vector_walkthrough():
    lines = vector_walkthrough()
    assert len(lines) == 4
    assert lines[0] == "Vector 1 value is (1.0, 2.0, 3.0)"
    assert lines[1] == "Vector 2 value is (0.5, 0.3, 0.2)"
    assert lines[2].startswith("Vector addition result is (1.5, ")
    assert lines[3].startswith("Vector substraction result is (0.5, ")


def test_gradient_colour_corners():
    assert gradient_colour(0, 0, 4, 3).to_tuple() == (0.0, 0.0, 0.2)
    assert gradient_colour(3, 2, 4, 3).to_tuple() == (1.0, 1.0, 0.2)


def test_gradient_colour_single_pixel():
    assert gradient_colour(0, 0, 1, 1).to_tuple() == (0.0, 0.0, 0.2)


def test_render_gradient_orientation():
    img = render_gradient(2, 2)
    # bottom left is dark, top right is yellow
    assert img.get_pixel(0, 1) == (0, 0, 51)
    assert img.get_pixel(1, 0) == (255, 255, 51)
    assert img.get_pixel(1, 1) == (255, 0, 51)
    assert img.get_pixel(0, 0) == (0, 255, 51)


def test_main_writes_image(tmp_path, capsys):
    output = tmp_path / "gradient.png"
    assert main(["-W", "4", "-H", "3", "-o", str(output)]) == 0
    assert "Vector 1 value is (1.0, 2.0, 3.0)" in capsys.readouterr().out
    with PILImage.open(output) as img:
        assert img.size == (4, 3)


def test_main_no_image(tmp_path, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["--no-image"]) == 0
    assert not (tmp_path / "gradient.png").exists()
    assert "Vector 2 value is" in capsys.readouterr().out


def test_main_reports_save_failure(tmp_path, caplog):
    output = tmp_path / "missing" / "gradient.png"
    with caplog.at_level(logging.ERROR, logger="raytrace"):
        assert main(["-W", "2", "-H", "2", "-o", str(output)]) == 1
    assert "could not save image" in caplog.text


def test_main_rejects_bad_size_before_printing(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["-W", "0"])
    assert excinfo.value.code == 2
    captured = capsys.readouterr()
    assert "Vector" not in captured.out
    assert "width and height must be positive" in captured.err
