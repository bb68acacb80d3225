import numpy as np
import pytest
from PIL import Image

from visionfilters.timing import load_bgr_image, main, time_per_image


@pytest.fixture
def image_path(tmp_path):
    rgb = np.zeros((8, 10, 3), dtype=np.uint8)
    rgb[..., 0] = 200
    rgb[..., 1] = 100
    rgb[..., 2] = 50
    path = tmp_path / "sample.png"
    Image.fromarray(rgb).save(path)
    return path, rgb


def test_load_reverses_channels(image_path):
    path, rgb = image_path
    bgr = load_bgr_image(path)
    assert bgr.shape == rgb.shape
    assert np.array_equal(bgr, rgb[..., ::-1])


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(ValueError):
        load_bgr_image(tmp_path / "missing.png")


def test_time_per_image_calls_func(image_path):
    calls = []
    result = time_per_image(calls.append, "frame", 4)
    assert calls == ["frame"] * 4
    assert result >= 0.0


@pytest.mark.parametrize("times", [0, -3])
def test_time_per_image_rejects_non_positive(times):
    with pytest.raises(ValueError):
        time_per_image(lambda image: None, None, times)


def test_main_reports_both_timings(image_path, capsys):
    path, _ = image_path
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Time per image (1): ")
    assert lines[1].startswith("Time per image (2): ")
    assert lines[0].endswith(" seconds")
    assert lines[2] == "Terminating"


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_unreadable_image(tmp_path, capsys):
    path = tmp_path / "broken.jpg"
    path.write_bytes(b"not an image")
    assert main([str(path)]) == 1
    assert "Unable to read image" in capsys.readouterr().err