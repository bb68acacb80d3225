# visionfilters

Image filters for 8-bit images held as numpy arrays. Color images have shape
`(rows, cols, 3)` in blue, green, red order; greyscale images have shape
`(rows, cols)`. Every filter returns a new array and leaves its input alone.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
pytest
```

## Filters: `visionfilters.filters`

- `to_grayscale(src)`: BGR to single-channel luma, using fixed-point weights.
- `alternative_grayscale(src)`: grey from the mean of blue and green (red is
  ignored), written to all three channels.
- `alternative_grayscale1(src)`: grey from the green channel alone.
- `alternative_grayscale3(src)`: green channel tripled, wrapping around the
  8-bit range.
- `sepia_filter(src)`: sepia tone, each channel clamped at 255.
- `blur5x5_1(src)`: direct 5x5 blur with kernel rows `1 2 4 2 1`. The outer two
  rows and columns are copied unchanged; images smaller than 5x5 come back as
  a plain copy.
- `blur5x5_2(src)`: the same kernel as two separable 1-D passes, repeating the
  edge pixels at the border.
- `sobel_x3x3(src)` and `sobel_y3x3(src)`: signed `int16` gradients (a
  `[1 2 1]/4` smoothing pass, then `[1 0 -1]`). Rows and columns the kernels
  cannot reach are zero.
- `magnitude(sx, sy)`: Euclidean magnitude of two gradient images, rounded
  and saturated to `uint8`.
- `convert_scale_abs(src, alpha=1.0)`: multiply by `alpha`, take the absolute
  value, round and saturate to `uint8`.
- `blur_quantize(src, levels=10)`: `blur5x5_1` followed by posterizing each
  channel into `levels` buckets; `levels` must be from 1 to 255.
- `bilateral_filter(src, diameter=9, sigma_color=75.0, sigma_space=75.0)`:
  edge-preserving smoothing over a circular neighbourhood with reflected
  borders, for 1- or 3-channel images.
- `cartoon_filter(src)`: bilateral smoothing with strong difference-of-blur
  edges painted black.
- `sketch_filter(src)`: white Sobel edges of the greyscale image on black.

An empty image, a wrong number of channels, mismatched gradient shapes or an
out-of-range argument raises `ValueError`.

```python
import numpy as np
from visionfilters.filters import sobel_x3x3, sobel_y3x3, magnitude

image = np.zeros((120, 160, 3), dtype=np.uint8)
image[:, 80:] = 255
edges = magnitude(sobel_x3x3(image), sobel_y3x3(image))
```

## Face boxes: `visionfilters.faces`

- `Rect(x, y, width, height)`: a frozen dataclass; `Rect.scaled(factor)`
  multiplies every field by `factor`, truncating toward zero.
- `draw_boxes(frame, faces, min_width=50, scale=1.0)`: returns a copy of
  `frame` with a 3-pixel outline in BGR `(170, 120, 110)` around every face
  whose width exceeds `min_width`, after scaling it by `scale`.
- `smooth_detection(last, current)`: averages two successive detections field
  by field; with `current` of `None` the previous rectangle is kept.

## Depth maps: `visionfilters.depth`

- `resize_image(image, size)`: bilinear resize to `size`, given as
  `(width, height)`.
- `prepare_input(image, scale_factor=1.0)`: resizes a BGR image by
  `scale_factor` and returns a `float32` array of shape `(1, 3, rows, cols)`
  holding R, G and B planes normalised with ImageNet mean and deviation.
- `depth_to_image(depth, output_size, num_slices=12.0, gamma=0.7)`: normalises
  a depth map to [0, 1], raises it to `gamma`, cuts it into `num_slices` grey
  bands (0 for the nearest, 255 for the farthest) and resizes to
  `output_size`. A leading batch axis of one is accepted; a constant map
  raises `ValueError`.

## Filter pipeline: `visionfilters.pipeline`

`FilterPipeline(quantize_levels=10, face_detector=None)` holds a set of
enabled filters, each a `FilterKind` whose value is the key that toggles it:

| key | filter     | key | filter     |
|-----|------------|-----|------------|
| g   | GRAYSCALE  | x   | SOBEL_X    |
| h   | ALT_GRAY   | y   | SOBEL_Y    |
| j   | ALT_GRAY2  | m   | MAGNITUDE  |
| e   | SEPIA      | i   | BLUR_QUANT |
| b   | BLUR1      | f   | FACES      |
| n   | BLUR2      | c   | CARTOON    |
|     |            | k   | SKETCH     |

- `handle_key(key)` takes a character or key code and returns `"quit"` for
  `q`, `"save"` for `s`, `"toggle"` after switching a filter, and `None`
  otherwise.
- `toggle(kind)` switches a filter and returns its new state; toggling
  `MAGNITUDE` also switches both Sobel filters off. `is_enabled(kind)` and the
  `enabled` property report the current state.
- `apply(frame)` runs the enabled filters in a fixed order and returns the
  result. `FACES` calls `face_detector` with a greyscale image and draws the
  rectangles it returns; without a detector it raises `RuntimeError`.
- `next_snapshot_name()` returns `image_0.jpg`, `image_1.jpg`, and so on.

## Timing the blurs: `visionfilters.timing`

```
visionfilters-timeblur path/to/image.jpg
```

prints the average processor time per image of `blur5x5_1` and `blur5x5_2`
over ten runs each. From code, `load_bgr_image(path)` reads a file as a BGR
array and `time_per_image(func, image, times=10)` returns the average time.

## What the package does not do

There is no camera capture and no window display: `FilterPipeline` processes
frames and interprets keys, but reading frames, showing them and writing the
snapshot files are left to the caller. The package does not detect faces
itself; a detector must be supplied. It does not run a depth-estimation
network either; `visionfilters.depth` only prepares the input tensor and
renders the network's output.