"""Face rectangles: scaling, drawing and smoothing of detections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

BOX_COLOR = (170, 120, 110)
BOX_THICKNESS = 3
DEFAULT_MIN_WIDTH = 50


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in pixel coordinates."""

    x: int
    y: int
    width: int
    height: int

    def scaled(self, factor: float) -> "Rect":
        """Multiply every field by ``factor``, truncating toward zero."""
        return Rect(
            int(self.x * factor),
            int(self.y * factor),
            int(self.width * factor),
            int(self.height * factor),
        )


def _fill(image: np.ndarray, top: int, bottom: int, left: int, right: int, value) -> None:
    rows, cols = image.shape[:2]
    top, left = max(top, 0), max(left, 0)
    bottom, right = min(bottom, rows - 1), min(right, cols - 1)
    if top <= bottom and left <= right:
        image[top:bottom + 1, left:right + 1] = value


def _draw_rect(image: np.ndarray, rect: Rect, value, thickness: int) -> None:
    half = thickness // 2
    x0, y0 = rect.x, rect.y
    x1, y1 = rect.x + rect.width - 1, rect.y + rect.height - 1
    _fill(image, y0 - half, y0 + half, x0 - half, x1 + half, value)
    _fill(image, y1 - half, y1 + half, x0 - half, x1 + half, value)
    _fill(image, y0 - half, y1 + half, x0 - half, x0 + half, value)
    _fill(image, y0 - half, y1 + half, x1 - half, x1 + half, value)


def draw_boxes(
    frame,
    faces: Iterable[Rect],
    min_width: int = DEFAULT_MIN_WIDTH,
    scale: float = 1.0,
) -> np.ndarray:
    """Return a copy of ``frame`` with an outline around each wide enough face.

    Faces whose width does not exceed ``min_width`` are skipped; the rest
    are scaled by ``scale`` before drawing.
    """
    image = np.array(frame, copy=True)
    if image.ndim not in (2, 3):
        raise ValueError(f"expected a 2-D or 3-D image, got {image.ndim} dimensions")
    if image.ndim == 3 and image.shape[2] == 3:
        value = np.array(BOX_COLOR, dtype=image.dtype)
    else:
        value = BOX_COLOR[0]
    for face in faces:
        if face.width > min_width:
            _draw_rect(image, face.scaled(scale), value, BOX_THICKNESS)
    return image


def _halve(total: int) -> int:
    """Integer division by two, truncating toward zero."""
    quotient = abs(total) // 2
    return quotient if total >= 0 else -quotient


def smooth_detection(last: Rect, current: Optional[Rect]) -> Rect:
    """Average the previous detection with the current one.

    When there is no current detection the previous one is kept.
    """
    if current is None:
        return last
    return Rect(
        _halve(current.x + last.x),
        _halve(current.y + last.y),
        _halve(current.width + last.width),
        _halve(current.height + last.height),
    )