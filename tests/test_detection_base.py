import dataclasses

import numpy as np
import pytest

from detnms.core.geometry import Rectangle
from detnms.detection.base import (
    Detection,
    Suppressor,
    detections_from_array,
    detections_to_array,
)
from typing import List, Sequence
from unittest.mock import patch


def test_detection_dataclass():
    rect = Rectangle(0, 0, 100, 100)
    d = Detection(rect=rect, score=0.9, class_id=1, label="person")
    assert d.rect == rect
    assert d.score == 0.9
    assert d.label == "person"
    assert d.class_id == 1


def test_detection_is_immutable():
    d = Detection(rect=Rectangle(0, 0, 1, 1), score=0.5, class_id=0)
    assert d.label is None
    with pytest.raises(dataclasses.FrozenInstanceError):
        d.score = 0.1


class MockSuppressor:
    def suppress(self, candidates: Sequence[Detection]) -> List[Detection]:
        return list(candidates[:1])


def test_suppressor_protocol():
    suppressor: Suppressor = MockSuppressor()
    candidates = [
        Detection(rect=Rectangle(0, 0, 10, 10), score=0.8, class_id=2, label="cat"),
        Detection(rect=Rectangle(0, 0, 10, 10), score=0.7, class_id=2, label="cat"),
    ]
    detections = suppressor.suppress(candidates)
    assert len(detections) == 1
    assert detections[0].label == "cat"


def test_detections_from_array():
    array = np.array([
        [10, 20, 30, 40, 0.9, 1.0],
        [50, 60, 70, 80, 0.1, 2.0],
    ])

    detections = detections_from_array(array, labels={1: "bicycle"})

    assert len(detections) == 2
    assert detections[0].rect == Rectangle(10.0, 20.0, 30.0, 40.0)
    assert detections[0].score == pytest.approx(0.9)
    assert detections[0].class_id == 1
    assert detections[0].label == "bicycle"
    assert detections[1].class_id == 2
    assert detections[1].label is None


def test_detections_from_empty_array():
    assert detections_from_array(np.zeros((0, 6))) == []


@pytest.mark.parametrize("shape", [(3, 5), (6,), (2, 3, 6)])
def test_detections_from_array_rejects_bad_shape(shape):
    with pytest.raises(ValueError, match="array"):
        detections_from_array(np.ones(shape))


def test_detections_from_array_rejects_fractional_class():
    with pytest.raises(ValueError, match="integral"):
        detections_from_array(np.array([[0, 0, 1, 1, 0.5, 1.5]]))


def test_detections_to_array():
    detections = [
        Detection(rect=Rectangle(1, 2, 3, 4), score=0.5, class_id=7),
    ]
    np.testing.assert_array_equal(
        detections_to_array(detections), np.array([[1, 2, 3, 4, 0.5, 7]])
    )
    assert detections_to_array([]).shape == (0, 6)


def test_array_hand_off_uses_rectangle_helpers():
    array = np.array([[1, 2, 3, 4, 0.5, 0], [5, 6, 7, 8, 0.6, 1]])

    with patch.object(Rectangle, "from_xyxy", wraps=Rectangle.from_xyxy) as from_xyxy:
        detections = detections_from_array(array)
    assert from_xyxy.call_count == 2
    assert all(type(d.rect.left) is float for d in detections)

    with patch.object(Rectangle, "as_array", autospec=True, side_effect=Rectangle.as_array) as as_array:
        packed = detections_to_array(detections)
    assert as_array.call_count == 2
    np.testing.assert_array_equal(packed, array)
