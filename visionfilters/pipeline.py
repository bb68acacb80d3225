"""A toggleable chain of filters driven by single-key commands."""

from __future__ import annotations

from enum import Enum
from itertools import count
from typing import Callable, Iterable, Optional, Union

import numpy as np

from .faces import Rect, draw_boxes
from .filters import (
    alternative_grayscale,
    alternative_grayscale3,
    blur5x5_1,
    blur5x5_2,
    blur_quantize,
    cartoon_filter,
    convert_scale_abs,
    magnitude,
    sepia_filter,
    sketch_filter,
    sobel_x3x3,
    sobel_y3x3,
    to_grayscale,
)

QUIT = "quit"
SAVE = "save"
TOGGLE = "toggle"

QUIT_KEY = "q"
SAVE_KEY = "s"
SOBEL_SCALE = 2.0
DEFAULT_QUANTIZE_LEVELS = 10

FaceDetector = Callable[[np.ndarray], Iterable[Rect]]


class FilterKind(Enum):
    """The available filters; each value is the key that toggles it."""

    GRAYSCALE = "g"
    ALT_GRAY = "h"
    ALT_GRAY2 = "j"
    SEPIA = "e"
    BLUR1 = "b"
    BLUR2 = "n"
    FACES = "f"
    SOBEL_X = "x"
    SOBEL_Y = "y"
    MAGNITUDE = "m"
    BLUR_QUANT = "i"
    CARTOON = "c"
    SKETCH = "k"


def _to_color(image: np.ndarray) -> np.ndarray:
    if image.ndim == 2:
        return np.repeat(image[..., np.newaxis], 3, axis=2)
    return image


def _to_gray(image: np.ndarray) -> np.ndarray:
    if image.ndim == 2:
        return image
    return to_grayscale(image)


class FilterPipeline:
    """Applies the enabled filters to each frame in a fixed order.

    Face boxes need a detector: a callable taking a greyscale image and
    returning the face rectangles found in it.
    """

    def __init__(
        self,
        quantize_levels: int = DEFAULT_QUANTIZE_LEVELS,
        face_detector: Optional[FaceDetector] = None,
    ) -> None:
        if not 1 <= quantize_levels <= 255:
            raise ValueError(
                f"quantize levels must be between 1 and 255, got {quantize_levels}"
            )
        self.quantize_levels = quantize_levels
        self.face_detector = face_detector
        self._enabled: set[FilterKind] = set()
        self._snapshots = count()

    @property
    def enabled(self) -> frozenset:
        """The filters currently switched on."""
        return frozenset(self._enabled)

    def handle_key(self, key: Union[str, int]) -> Optional[str]:
        """Act on a key press.

        Returns ``"quit"`` or ``"save"`` for those commands, ``"toggle"``
        when a filter was switched, and ``None`` for any other key.
        """
        if isinstance(key, int):
            if key < 0:
                return None
            key = chr(key & 0xFF)
        if key == QUIT_KEY:
            return QUIT
        if key == SAVE_KEY:
            return SAVE
        try:
            kind = FilterKind(key)
        except ValueError:
            return None
        self.toggle(kind)
        return TOGGLE

    def toggle(self, kind) -> bool:
        """Switch a filter on or off and return its new state.

        Toggling the magnitude filter always switches both Sobel filters off.
        """
        kind = FilterKind(kind)
        self._enabled ^= {kind}
        if kind is FilterKind.MAGNITUDE:
            self._enabled -= {FilterKind.SOBEL_X, FilterKind.SOBEL_Y}
        return kind in self._enabled

    def is_enabled(self, kind) -> bool:
        """Whether the given filter is switched on."""
        return FilterKind(kind) in self._enabled

    def apply(self, frame) -> np.ndarray:
        """Run the enabled filters over ``frame`` and return the result."""
        image = np.array(frame, copy=True)
        if image.size == 0:
            raise ValueError("frame is empty")
        on = self._enabled

        if FilterKind.GRAYSCALE in on:
            image = _to_gray(image)
        if FilterKind.ALT_GRAY in on:
            image = alternative_grayscale(_to_color(image))
        if FilterKind.SEPIA in on:
            image = sepia_filter(_to_color(image))
        if FilterKind.BLUR1 in on:
            image = blur5x5_1(image)
        if FilterKind.BLUR2 in on:
            image = blur5x5_2(image)
        if FilterKind.MAGNITUDE in on:
            image = magnitude(sobel_x3x3(image), sobel_y3x3(image))
        if FilterKind.SOBEL_X in on:
            image = convert_scale_abs(sobel_x3x3(image), SOBEL_SCALE)
        if FilterKind.SOBEL_Y in on:
            image = convert_scale_abs(sobel_y3x3(image), SOBEL_SCALE)
        if FilterKind.BLUR_QUANT in on:
            image = blur_quantize(image, self.quantize_levels)
        if FilterKind.FACES in on:
            if self.face_detector is None:
                raise RuntimeError("no face detector configured")
            faces = list(self.face_detector(_to_gray(image)))
            image = draw_boxes(image, faces)
        if FilterKind.CARTOON in on:
            image = cartoon_filter(_to_color(image))
        if FilterKind.SKETCH in on:
            image = sketch_filter(_to_color(image))
        if FilterKind.ALT_GRAY2 in on:
            image = alternative_grayscale3(_to_color(image))
        return image

    def next_snapshot_name(self) -> str:
        """File name for the next saved frame: image_0.jpg, image_1.jpg, ..."""
        return f"image_{next(self._snapshots)}.jpg"