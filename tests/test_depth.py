import numpy as np
import pytest

from visionfilters.depth import depth_to_image, prepare_input, resize_image


def _image(rows=8, cols=10):
    rng = np.random.default_rng(7)
    return rng.integers(0, 256, size=(rows, cols, 3), dtype=np.uint8)


def test_resize_same_size_is_identity():
    image = _image()
    assert np.array_equal(resize_image(image, (10, 8)), image)


def test_resize_output_shape_and_dtype():
    result = resize_image(_image(), (15, 6))
    assert result.shape == (6, 15, 3)
    assert result.dtype == np.uint8


def test_resize_constant_stays_constant():
    image = np.full((5, 7), 42, dtype=np.uint8)
    result = resize_image(image, (13, 11))
    assert result.shape == (11, 13)
    assert np.unique(result).tolist() == [42]


def test_resize_upsample_keeps_corners():
    image = np.array([[0, 100], [200, 50]], dtype=np.uint8)
    result = resize_image(image, (4, 4))
    assert result[0, 0] == image[0, 0]
    assert result[0, -1] == image[0, -1]
    assert result[-1, 0] == image[-1, 0]
    assert result[-1, -1] == image[-1, -1]


def test_resize_downsample_averages_pair():
    image = np.array([[0, 100]], dtype=np.uint8)
    assert resize_image(image, (1, 1))[0, 0] == 50


def test_resize_values_within_input_range():
    image = _image()
    result = resize_image(image, (23, 17))
    assert result.min() >= image.min()
    assert result.max() <= image.max()


def test_resize_zero_size_raises():
    with pytest.raises(ValueError):
        resize_image(_image(), (0, 5))


def test_resize_empty_raises():
    with pytest.raises(ValueError):
        resize_image(np.zeros((0, 3), dtype=np.uint8), (2, 2))


def test_prepare_input_shape():
    tensor = prepare_input(_image(4, 6))
    assert tensor.shape == (1, 3, 4, 6)
    assert tensor.dtype == np.float32


def test_prepare_input_plane_order_and_normalisation():
    image = np.zeros((2, 2, 3), dtype=np.uint8)
    image[..., 2] = 255
    tensor = prepare_input(image)
    assert tensor[0, 0, 0, 0] == pytest.approx((1.0 - 0.485) / 0.229, rel=1e-6)
    assert tensor[0, 1, 0, 0] == pytest.approx((0.0 - 0.456) / 0.224, rel=1e-6)
    assert tensor[0, 2, 0, 0] == pytest.approx((0.0 - 0.406) / 0.225, rel=1e-6)


def test_prepare_input_scale_matches_resize():
    image = _image(10, 20)
    scaled = prepare_input(image, 0.5)
    expected = prepare_input(resize_image(image, (10, 5)))
    assert scaled.shape == expected.shape
    assert np.array_equal(scaled, expected)


def test_prepare_input_rejects_bad_scale():
    with pytest.raises(ValueError):
        prepare_input(_image(), 0.0)


def test_prepare_input_rejects_grayscale():
    with pytest.raises(ValueError):
        prepare_input(np.zeros((4, 4), dtype=np.uint8))


def _ramp():
    return np.arange(20, dtype=np.float32).reshape(4, 5)


def test_depth_to_image_range_and_shape():
    result = depth_to_image(_ramp(), (5, 4))
    assert result.shape == (4, 5)
    assert result.dtype == np.uint8
    assert result.min() == 0
    assert result.max() == 255


def test_depth_to_image_is_monotonic():
    flat = depth_to_image(_ramp(), (5, 4)).ravel()
    assert np.array_equal(np.sort(flat), flat)


def test_depth_to_image_band_count():
    depth = np.linspace(0.0, 1.0, 400, dtype=np.float32).reshape(20, 20)
    result = depth_to_image(depth, (20, 20), num_slices=12)
    assert len(np.unique(result)) <= 13


def test_depth_to_image_accepts_batch_axis():
    ramp = _ramp()
    assert np.array_equal(
        depth_to_image(ramp[np.newaxis], (5, 4)), depth_to_image(ramp, (5, 4))
    )


def test_depth_to_image_resizes_to_output_size():
    assert depth_to_image(_ramp(), (10, 8)).shape == (8, 10)


def test_depth_to_image_constant_raises():
    with pytest.raises(ValueError):
        depth_to_image(np.ones((4, 4), dtype=np.float32), (4, 4))


def test_depth_to_image_bad_shape_raises():
    with pytest.raises(ValueError):
        depth_to_image(np.arange(10, dtype=np.float32), (10, 1))