import numpy as np
import pytest

from visionfilters.faces import BOX_COLOR, Rect, draw_boxes, smooth_detection


def _frame(rows=100, cols=100):
    return np.zeros((rows, cols, 3), dtype=np.uint8)


def test_scaled_by_one_is_identity():
    rect = Rect(7, 11, 13, 17)
    assert rect.scaled(1.0) == rect


def test_scaled_by_two():
    assert Rect(1, 2, 3, 4).scaled(2) == Rect(2, 4, 6, 8)


def test_scaled_truncates():
    assert Rect(3, 3, 3, 3).scaled(0.5) == Rect(1, 1, 1, 1)


def test_draw_boxes_draws_outline_in_box_color():
    frame = _frame()
    result = draw_boxes(frame, [Rect(20, 20, 60, 60)])
    assert tuple(result[20, 20]) == BOX_COLOR
    assert tuple(result[20, 50]) == BOX_COLOR
    assert tuple(result[79, 79]) == BOX_COLOR
    assert tuple(result[50, 50]) == (0, 0, 0)
    assert tuple(result[5, 5]) == (0, 0, 0)


def test_draw_boxes_leaves_input_unchanged():
    frame = _frame()
    draw_boxes(frame, [Rect(20, 20, 60, 60)])
    assert not frame.any()


def test_narrow_faces_are_skipped():
    frame = _frame()
    result = draw_boxes(frame, [Rect(10, 10, 50, 50)])
    assert np.array_equal(result, frame)


def test_min_width_parameter():
    result = draw_boxes(_frame(), [Rect(10, 10, 30, 30)], min_width=10)
    assert tuple(result[10, 10]) == BOX_COLOR


def test_scale_moves_box():
    result = draw_boxes(_frame(), [Rect(10, 10, 60, 60)], scale=0.5)
    assert tuple(result[5, 5]) == BOX_COLOR
    assert tuple(result[10, 10]) == (0, 0, 0)


def test_box_outside_frame_is_clipped():
    result = draw_boxes(_frame(), [Rect(0, 0, 200, 200)])
    assert tuple(result[0, 50]) == BOX_COLOR
    assert tuple(result[50, 0]) == BOX_COLOR
    assert tuple(result[50, 50]) == (0, 0, 0)


def test_grayscale_frame_uses_first_component():
    frame = np.zeros((100, 100), dtype=np.uint8)
    result = draw_boxes(frame, [Rect(20, 20, 60, 60)])
    assert result[20, 20] == BOX_COLOR[0]


def test_invalid_frame_raises():
    with pytest.raises(ValueError):
        draw_boxes(np.zeros(10, dtype=np.uint8), [])


def test_smooth_same_rect_is_fixed_point():
    rect = Rect(40, 60, 80, 100)
    assert smooth_detection(rect, rect) == rect


def test_smooth_without_detection_keeps_last():
    last = Rect(1, 2, 3, 4)
    assert smooth_detection(last, None) == last


def test_smooth_from_empty():
    assert smooth_detection(Rect(0, 0, 0, 0), Rect(10, 20, 30, 40)) == Rect(5, 10, 15, 20)


def test_smooth_stays_between_inputs():
    last = Rect(0, 100, 7, 50)
    current = Rect(33, 10, 91, 50)
    result = smooth_detection(last, current)
    for field in ("x", "y", "width", "height"):
        low = min(getattr(last, field), getattr(current, field))
        high = max(getattr(last, field), getattr(current, field))
        assert low <= getattr(result, field) <= high