"""Pre- and post-processing for a monocular depth network.

Input images are BGR ``uint8`` arrays. The network takes a float tensor
of shape ``(1, 3, rows, cols)`` with normalised R, G and B planes and
produces a relative depth map, which is turned into a banded greyscale
image.
"""

from __future__ import annotations

import numpy as np

_MEAN = (0.485, 0.456, 0.406)
_STD = (0.229, 0.224, 0.225)

DEFAULT_NUM_SLICES = 12.0
DEFAULT_GAMMA = 0.7


def _axis_weights(src_len: int, dst_len: int):
    scale = src_len / dst_len
    position = (np.arange(dst_len) + 0.5) * scale - 0.5
    position = np.clip(position, 0.0, src_len - 1)
    low = np.floor(position).astype(np.intp)
    high = np.minimum(low + 1, src_len - 1)
    return low, high, position - low


def resize_image(image, size) -> np.ndarray:
    """Bilinearly resize ``image`` to ``size``, given as ``(width, height)``."""
    src = np.asarray(image)
    if src.size == 0:
        raise ValueError("image is empty")
    if src.ndim not in (2, 3):
        raise ValueError(f"expected a 2-D or 3-D image, got {src.ndim} dimensions")
    width, height = (int(v) for v in size)
    if width <= 0 or height <= 0:
        raise ValueError(f"output size must be positive, got {width}x{height}")
    rows, cols = src.shape[:2]
    if (rows, cols) == (height, width):
        return src.copy()

    extra = (1,) * (src.ndim - 2)
    data = src.astype(np.float64)

    y0, y1, wy = _axis_weights(rows, height)
    wy = wy.reshape((-1, 1) + extra)
    vertical = data[y0] * (1.0 - wy) + data[y1] * wy

    x0, x1, wx = _axis_weights(cols, width)
    wx = wx.reshape((1, -1) + extra)
    result = vertical[:, x0] * (1.0 - wx) + vertical[:, x1] * wx

    if np.issubdtype(src.dtype, np.integer):
        info = np.iinfo(src.dtype)
        return np.clip(np.rint(result), info.min, info.max).astype(src.dtype)
    return result.astype(src.dtype)


def prepare_input(image, scale_factor: float = 1.0) -> np.ndarray:
    """Build the network input tensor from a BGR image.

    The image is first resized by ``scale_factor``; the result has shape
    ``(1, 3, rows, cols)`` holding normalised R, G and B planes.
    """
    src = np.asarray(image)
    if src.size == 0:
        raise ValueError("image is empty")
    if src.ndim != 3 or src.shape[2] != 3:
        raise ValueError("expected a 3-channel BGR image")
    if scale_factor <= 0:
        raise ValueError(f"scale factor must be positive, got {scale_factor}")
    if scale_factor != 1.0:
        rows, cols = src.shape[:2]
        size = (round(cols * scale_factor), round(rows * scale_factor))
        src = resize_image(src, size)

    data = src.astype(np.float64) / 255.0
    planes = [
        (data[..., 2 - index] - mean) / std
        for index, (mean, std) in enumerate(zip(_MEAN, _STD))
    ]
    return np.stack(planes)[np.newaxis].astype(np.float32)


def depth_to_image(
    depth,
    output_size,
    num_slices: float = DEFAULT_NUM_SLICES,
    gamma: float = DEFAULT_GAMMA,
) -> np.ndarray:
    """Turn a relative depth map into a banded 8-bit image of ``output_size``.

    Depth is normalised to [0, 1], raised to ``gamma`` and cut into
    ``num_slices`` bands, 0 being the minimum and 255 the maximum depth.
    A leading batch axis of length one is accepted.
    """
    values = np.asarray(depth, dtype=np.float32)
    if values.ndim == 3 and values.shape[0] == 1:
        values = values[0]
    if values.ndim != 2:
        raise ValueError(f"expected a 2-D depth map, got shape {values.shape}")
    if values.size == 0:
        raise ValueError("depth map is empty")
    if num_slices <= 0:
        raise ValueError(f"num_slices must be positive, got {num_slices}")

    low, high = values.min(), values.max()
    if high == low:
        raise ValueError("depth map is constant")

    slices = np.float32(num_slices)
    normalized = (values - low) / (high - low)
    curved = np.power(normalized, np.float32(gamma))
    banded = np.float32(255.0) * np.floor(curved * slices) / slices
    image = np.clip(banded, 0, 255).astype(np.uint8)
    return resize_image(image, output_size)