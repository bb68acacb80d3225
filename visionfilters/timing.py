"""Compare the running time of the two 5x5 blur implementations."""

from __future__ import annotations

import sys
import time
from typing import Callable

import numpy as np
from PIL import Image

from .filters import blur5x5_1, blur5x5_2

DEFAULT_TIMES = 10


def load_bgr_image(path) -> np.ndarray:
    """Read an image file as a BGR ``uint8`` array."""
    try:
        with Image.open(path) as picture:
            rgb = np.asarray(picture.convert("RGB"), dtype=np.uint8)
    except (OSError, ValueError) as exc:
        raise ValueError(f"Unable to read image {path}") from exc
    return np.ascontiguousarray(rgb[..., ::-1])


def time_per_image(
    func: Callable[[np.ndarray], object], image, times: int = DEFAULT_TIMES
) -> float:
    """Average processor time in seconds of ``times`` calls of ``func(image)``."""
    if times <= 0:
        raise ValueError(f"times must be positive, got {times}")
    start = time.process_time()
    for _ in range(times):
        func(image)
    return (time.process_time() - start) / times


def main(argv=None) -> int:
    """Time both blurs on the image named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage timeblur <image filename>", file=sys.stderr)
        return 1
    filename = args[0]
    try:
        image = load_bgr_image(filename)
    except ValueError:
        print(f"Unable to read image {filename}", file=sys.stderr)
        return 1

    for label, func in (("1", blur5x5_1), ("2", blur5x5_2)):
        seconds = time_per_image(func, image, DEFAULT_TIMES)
        print(f"Time per image ({label}): {seconds:.4f} seconds")
    print("Terminating")
    return 0


if __name__ == "__main__":
    sys.exit(main())