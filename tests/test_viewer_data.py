import pytest

from meshview.viewer_data import ViewerData, clamp_depth, clamp_scale


def test_defaults():
    data = ViewerData()
    assert data.scene_graph is None
    assert data.bbox_depth == 0
    assert data.bbox_cube is True
    assert data.bbox_occupied is False
    assert data.bbox_scale == pytest.approx(1.05)


@pytest.mark.parametrize("depth", [-5, -1, 0, 3, 10, 11, 100])
def test_clamp_depth_in_range(depth):
    result = clamp_depth(depth)
    assert 0 <= result <= 10
    if 0 <= depth <= 10:
        assert result == depth


def test_clamp_depth_limits():
    assert clamp_depth(-1) == 0
    assert clamp_depth(11) == 10


def test_clamp_scale():
    assert clamp_scale(-0.5) == 0.0
    assert clamp_scale(2.5) == 2.5


def test_depth_setter_clamps():
    data = ViewerData()
    data.bbox_depth = 42
    assert data.bbox_depth == 10
    data.bbox_depth = -3
    assert data.bbox_depth == 0
    data.bbox_depth = 4
    assert data.bbox_depth == 4


def test_scale_setter_clamps():
    data = ViewerData()
    data.bbox_scale = -1.0
    assert data.bbox_scale == 0.0
    data.bbox_scale = 1.5
    assert data.bbox_scale == 1.5


def test_set_scene_graph_replaces_and_clears():
    data = ViewerData()
    first, second = object(), object()
    data.set_scene_graph(first)
    assert data.scene_graph is first
    data.set_scene_graph(second)
    assert data.scene_graph is second
    data.set_scene_graph(None)
    assert data.scene_graph is None


def test_flags_are_independent():
    data = ViewerData()
    data.bbox_cube = False
    data.bbox_occupied = True
    assert (data.bbox_cube, data.bbox_occupied) == (False, True)
    assert data.bbox_depth == 0