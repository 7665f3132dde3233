import pytest

from geolisp import EvaluateOptions, Label, Point, print_values, run_script
from geolisp.values import Angle, Circle, Triangle

INTERSECTIONS = """
(setq c (circle (point 0 0) 5))
(setq l (lineseg (point -10 0) (point 10 0)))
(setq m (lineseg (point 3 -10) (point 3 10)))

; chord endpoints
(setq p (intersect l c 0))
(setq q (intersect l c 1))
(setq r (intersect m c 0))

(intersect l m)
(midpoint p r)
(angle q p r)
(/ (* 7 3) 2)
"""


def test_intersections_scene():
    values = run_script(INTERSECTIONS)
    shown = [value for value in values[6:]]

    assert shown[0] == Point(3, 0)
    assert shown[1] == Point(4, 2)
    assert shown[2].degrees == pytest.approx(63.4349488, abs=1e-6)
    assert shown[3] == 10
    assert shown[4:] == [Label('p', Point(5, 0)), Label('q', Point(-5, 0)), Label('r', Point(3, 4))]


def test_intersections_scene_prints():
    out = print_values(run_script(INTERSECTIONS))

    assert out.splitlines() == [
        'point (3, 0)',
        'point (4, 2)',
        'angle (-5, 0) (5, 0) (3, 4) measure 63.4349',
        '10',
        'label p 5 0',
        'label q -5 0',
        'label r 3 4',
    ]


def test_incircle_scene():
    text = """
    (setq c (circle))
    (setq t (triangle c))
    c t
    (setq i (incenter t))
    (circle i (inradius t))
    """

    values = run_script(text, EvaluateOptions(random_seed=123))
    circle, triangle, incircle = values[2], values[3], values[5]

    assert isinstance(circle, Circle)
    assert isinstance(triangle, Triangle)
    assert incircle.radius == pytest.approx(triangle.inradius())
    assert values[-1].name == 'i'


def test_inscribed_angle_scene():
    text = "(setq c (circle (point 1 2) 4)) (setq a (iangle c 40)) a (triangle a)"

    values = run_script(text, EvaluateOptions(random_seed=7))

    assert isinstance(values[2], Angle)
    assert values[2].degrees == pytest.approx(40.0, abs=1e-6)
    assert values[3].vertices == (values[2].start, values[2].center, values[2].end)
