"""Image filters for BGR ``uint8`` images held as numpy arrays.

Color images have shape ``(rows, cols, 3)`` in blue, green, red order.
Greyscale images have shape ``(rows, cols)``. Every filter returns a new
array and leaves its input unchanged. An empty input raises ``ValueError``.
"""

from __future__ import annotations

from itertools import product

import numpy as np

_BLUR_KERNEL = (1, 2, 4, 2, 1)
_BLUR_2D_SUM = 100
_BLUR_1D_SUM = 10

# Fixed-point luma weights (B, G, R) scaled by 2**14.
_GRAY_SHIFT = 14
_GRAY_WEIGHTS = (1868, 9617, 4899)

_CARTOON_EDGE_THRESHOLD = 20
_SKETCH_EDGE_THRESHOLD = 15


def _as_image(src, *, color: bool = False) -> np.ndarray:
    image = np.asarray(src)
    if image.size == 0:
        raise ValueError("image is empty")
    if image.ndim not in (2, 3):
        raise ValueError(f"expected a 2-D or 3-D image, got {image.ndim} dimensions")
    if color and (image.ndim != 3 or image.shape[2] != 3):
        raise ValueError("expected a 3-channel BGR image")
    return image


def _pad_spec(image: np.ndarray, rows: int, cols: int) -> list[tuple[int, int]]:
    return [(rows, rows), (cols, cols)] + [(0, 0)] * (image.ndim - 2)


def _saturate(values: np.ndarray) -> np.ndarray:
    """Round to nearest and clamp into the 8-bit range."""
    return np.clip(np.rint(values), 0, 255).astype(np.uint8)


def to_grayscale(src) -> np.ndarray:
    """Convert a BGR image to a single-channel luma image."""
    image = _as_image(src, color=True).astype(np.int64)
    weighted = sum(
        image[..., channel] * weight for channel, weight in enumerate(_GRAY_WEIGHTS)
    )
    gray = (weighted + (1 << (_GRAY_SHIFT - 1))) >> _GRAY_SHIFT
    return gray.astype(np.uint8)


def alternative_grayscale(src) -> np.ndarray:
    """Grey from the mean of blue and green, ignoring red."""
    image = _as_image(src, color=True).astype(np.int64)
    value = ((image[..., 0] + image[..., 1]) // 2).astype(np.uint8)
    return np.repeat(value[..., np.newaxis], 3, axis=2)


def alternative_grayscale1(src) -> np.ndarray:
    """Grey taken from the green channel alone."""
    image = _as_image(src, color=True)
    green = image[..., 1].astype(np.uint8)
    return np.repeat(green[..., np.newaxis], 3, axis=2)


def alternative_grayscale3(src) -> np.ndarray:
    """Green channel tripled, wrapping around the 8-bit range."""
    image = _as_image(src, color=True).astype(np.int64)
    value = ((image[..., 1] * 3) % 256).astype(np.uint8)
    return np.repeat(value[..., np.newaxis], 3, axis=2)


def sepia_filter(src) -> np.ndarray:
    """Apply a sepia tone, clamping each channel at 255."""
    image = _as_image(src, color=True).astype(np.float64)
    blue, green, red = image[..., 0], image[..., 1], image[..., 2]
    channels = (
        blue * 0.131 + green * 0.534 + red * 0.272,
        blue * 0.168 + green * 0.686 + red * 0.349,
        blue * 0.189 + green * 0.769 + red * 0.393,
    )
    stacked = np.stack([np.minimum(255.0, channel) for channel in channels], axis=2)
    return np.trunc(stacked).astype(np.uint8)


def blur5x5_1(src) -> np.ndarray:
    """5x5 Gaussian blur; the outer two rows and columns are copied unchanged."""
    image = _as_image(src)
    result = image.astype(np.uint8, copy=True)
    rows, cols = image.shape[:2]
    if rows < 5 or cols < 5:
        return result
    data = image.astype(np.int64)
    inner_rows, inner_cols = rows - 4, cols - 4
    total = np.zeros((inner_rows, inner_cols) + image.shape[2:], dtype=np.int64)
    for (dy, wy), (dx, wx) in product(enumerate(_BLUR_KERNEL), repeat=2):
        total += wy * wx * data[dy:dy + inner_rows, dx:dx + inner_cols]
    result[2:-2, 2:-2] = np.clip(total // _BLUR_2D_SUM, 0, 255)
    return result


def blur5x5_2(src) -> np.ndarray:
    """Separable 5x5 Gaussian blur with edge replication at the borders."""
    image = _as_image(src)
    rows, cols = image.shape[:2]
    data = image.astype(np.int64)

    padded = np.pad(data, _pad_spec(data, 0, 2), mode="edge")
    horizontal = sum(
        weight * padded[:, k:k + cols] for k, weight in enumerate(_BLUR_KERNEL)
    ) // _BLUR_1D_SUM

    padded = np.pad(horizontal, _pad_spec(horizontal, 2, 0), mode="edge")
    vertical = sum(
        weight * padded[k:k + rows] for k, weight in enumerate(_BLUR_KERNEL)
    ) // _BLUR_1D_SUM
    return vertical.astype(np.uint8)


def sobel_x3x3(src) -> np.ndarray:
    """Signed horizontal gradient: vertical [1 2 1]/4 then horizontal [1 0 -1].

    Rows and columns the kernels cannot reach are left at zero.
    """
    image = _as_image(src)
    data = image.astype(np.int32)
    temp = np.zeros(image.shape, dtype=np.int32)
    if image.shape[0] >= 3:
        temp[1:-1] = (data[:-2] + 2 * data[1:-1] + data[2:]) // 4
    result = np.zeros(image.shape, dtype=np.int16)
    if image.shape[1] >= 3:
        result[:, 1:-1] = temp[:, :-2] - temp[:, 2:]
    return result


def sobel_y3x3(src) -> np.ndarray:
    """Signed vertical gradient: horizontal [1 2 1]/4 then vertical [1 0 -1].

    Rows and columns the kernels cannot reach are left at zero.
    """
    image = _as_image(src)
    data = image.astype(np.int32)
    temp = np.zeros(image.shape, dtype=np.int32)
    if image.shape[1] >= 3:
        temp[:, 1:-1] = (data[:, :-2] + 2 * data[:, 1:-1] + data[:, 2:]) // 4
    result = np.zeros(image.shape, dtype=np.int16)
    if image.shape[0] >= 3:
        result[1:-1] = temp[:-2] - temp[2:]
    return result


def magnitude(sx, sy) -> np.ndarray:
    """Euclidean gradient magnitude of two gradient images, saturated to 8 bits."""
    gx = _as_image(sx)
    gy = _as_image(sy)
    if gx.shape != gy.shape:
        raise ValueError(f"gradient shapes differ: {gx.shape} and {gy.shape}")
    fx = gx.astype(np.float64)
    fy = gy.astype(np.float64)
    return _saturate(np.sqrt(fx * fx + fy * fy))


def convert_scale_abs(src, alpha=1.0) -> np.ndarray:
    """Scale, take the absolute value and saturate to 8 bits."""
    image = _as_image(src)
    return _saturate(np.abs(image.astype(np.float64) * alpha))


def blur_quantize(src, levels=10) -> np.ndarray:
    """Blur with ``blur5x5_1`` and then posterize into ``levels`` buckets."""
    if not 1 <= levels <= 255:
        raise ValueError(f"levels must be between 1 and 255, got {levels}")
    image = _as_image(src)
    blurred = blur5x5_1(image).astype(np.float32)
    bucket = np.float32(255.0) / np.float32(levels)
    index = np.floor(blurred / bucket)
    return np.floor(index * bucket).astype(np.uint8)


def bilateral_filter(src, diameter=9, sigma_color=75.0, sigma_space=75.0) -> np.ndarray:
    """Edge-preserving bilateral smoothing over a circular neighbourhood.

    Colour distance is the sum of absolute channel differences; borders
    are reflected without repeating the edge pixel.
    """
    image = _as_image(src)
    if image.ndim == 3 and image.shape[2] not in (1, 3):
        raise ValueError("expected a 1- or 3-channel image")
    if sigma_color <= 0:
        sigma_color = 1.0
    if sigma_space <= 0:
        sigma_space = 1.0
    radius = diameter // 2 if diameter > 0 else int(round(sigma_space * 1.5))
    radius = max(radius, 1)
    color_coeff = -0.5 / (sigma_color * sigma_color)
    space_coeff = -0.5 / (sigma_space * sigma_space)

    rows, cols = image.shape[:2]
    data = image.astype(np.float64)
    padded = np.pad(data, _pad_spec(data, radius, radius), mode="reflect")
    accumulated = np.zeros_like(data)
    weights = np.zeros((rows, cols), dtype=np.float64)

    for dy, dx in product(range(-radius, radius + 1), repeat=2):
        distance_sq = dy * dy + dx * dx
        if distance_sq > radius * radius:
            continue
        neighbour = padded[radius + dy:radius + dy + rows, radius + dx:radius + dx + cols]
        difference = np.abs(neighbour - data)
        if difference.ndim == 3:
            difference = difference.sum(axis=2)
        weight = np.exp(space_coeff * distance_sq + color_coeff * difference * difference)
        weights += weight
        accumulated += neighbour * (weight[..., np.newaxis] if data.ndim == 3 else weight)

    norm = weights[..., np.newaxis] if data.ndim == 3 else weights
    return _saturate(accumulated / norm)


def cartoon_filter(src) -> np.ndarray:
    """Bilateral smoothing with strong difference-of-blur edges drawn in black."""
    image = _as_image(src, color=True)
    filtered = bilateral_filter(image, 9, 75.0, 75.0)
    gray = to_grayscale(filtered)
    blur1 = blur5x5_1(gray)
    blur2 = blur5x5_1(blur1)
    edges = blur1.astype(np.int32) - blur2.astype(np.int32) > _CARTOON_EDGE_THRESHOLD
    result = filtered.copy()
    result[edges] = 0
    return result


def sketch_filter(src) -> np.ndarray:
    """White Sobel edges of the greyscale image on a black background."""
    image = _as_image(src, color=True)
    gray = to_grayscale(image)
    edges = magnitude(sobel_x3x3(gray), sobel_y3x3(gray))
    result = np.zeros(image.shape[:2] + (3,), dtype=np.uint8)
    result[edges > _SKETCH_EDGE_THRESHOLD] = 255
    return result