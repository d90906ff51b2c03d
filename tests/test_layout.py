import numpy as np
import pytest

from meshview.buffer import BufferType, build_face_set_buffer, build_line_set_buffer
from meshview.layout import (
    FLOAT_SIZE,
    Attribute,
    DrawMode,
    ShaderSettings,
    attribute_layout,
    draw_mode,
)

TRIANGLE = [0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0]


def _face_buffer(with_normal, with_color):
    return build_face_set_buffer(
        TRIANGLE,
        [0, 1, 2, -1],
        normal=[0.0, 0.0, 1.0] * 3 if with_normal else (),
        color=[1.0, 0.5, 0.25] * 3 if with_color else (),
    )


@pytest.mark.parametrize(
    "with_normal,with_color",
    [(False, False), (True, False), (False, True), (True, True)],
)
def test_stride_matches_interleaved_data(with_normal, with_color):
    buf = _face_buffer(with_normal, with_color)
    layout = attribute_layout(buf.buffer_type)
    floats_per_vertex = len(buf.interleaved()) // buf.number_of_vertices()
    assert all(a.stride == floats_per_vertex * FLOAT_SIZE for a in layout)


def test_material_layout_has_only_positions():
    assert attribute_layout(BufferType.MATERIAL) == (Attribute("vertex", 0, 3, 3 * FLOAT_SIZE),)


def test_color_normal_order():
    names = [a.name for a in attribute_layout(BufferType.COLOR_NORMAL)]
    assert names == ["vertex", "vnormal", "vcolor"]


def test_offsets_locate_attribute_values():
    buf = _face_buffer(True, True)
    data = buf.interleaved()
    layout = {a.name: a for a in attribute_layout(buf.buffer_type)}
    first = layout["vcolor"].offset // FLOAT_SIZE
    np.testing.assert_allclose(data[first:first + 3], [1.0, 0.5, 0.25])
    normal = layout["vnormal"].offset // FLOAT_SIZE
    np.testing.assert_allclose(data[normal:normal + 3], [0.0, 0.0, 1.0])


def test_color_layout_has_no_normal():
    names = {a.name for a in attribute_layout(BufferType.COLOR)}
    assert "vnormal" not in names and "vcolor" in names


def test_draw_mode_faces():
    assert draw_mode(_face_buffer(False, False)) is DrawMode.TRIANGLES


def test_draw_mode_lines():
    buf = build_line_set_buffer(TRIANGLE, [0, 1, 2, -1])
    assert draw_mode(buf) is DrawMode.LINES


def test_draw_mode_points():
    buf = build_face_set_buffer(TRIANGLE, [])
    assert draw_mode(buf) is DrawMode.POINTS


def test_settings_defaults():
    settings = ShaderSettings()
    assert settings.point_size == 4.0
    assert settings.line_width == 2.0
    np.testing.assert_array_equal(settings.mvp_matrix, np.identity(4))


def test_negative_sizes_clamped_to_zero():
    settings = ShaderSettings(point_size=-3.0, line_width=-1.0)
    assert settings.point_size == 0.0
    assert settings.line_width == 0.0


def test_setters_keep_positive_values_and_clamp_negative():
    settings = ShaderSettings()
    settings.point_size = 7.5
    settings.line_width = -2.0
    assert settings.point_size == 7.5
    assert settings.line_width == 0.0