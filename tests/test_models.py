import pytest

from brickengine.models import (
    TRIANGLE_STRIP,
    BufferType,
    Model,
    RectModel,
    SquareModel,
    Vertex,
)
from brickengine.texture import Texture


def test_buffer_type_values():
    assert [t.value for t in BufferType] == [0, 1, 2, 3]
    assert BufferType(1) is BufferType.RECTANGLE


def test_model_is_abstract():
    with pytest.raises(TypeError):
        Model()


def test_square_vertices_span_unit_range():
    model = SquareModel(3.0)
    positions = [v.position for v in model.vertices]
    assert positions == [
        (-1.0, -1.0, 0.0),
        (-1.0, 1.0, 0.0),
        (1.0, -1.0, 0.0),
        (1.0, 1.0, 0.0),
    ]
    assert model.size == 3.0


def test_square_counts_and_indices():
    model = SquareModel(1.0)
    assert model.vertex_count == 4
    assert model.index_count == 4
    assert model.indices == (0, 1, 2, 3)
    assert model.topology == TRIANGLE_STRIP


def test_texture_coordinates_follow_corners():
    model = RectModel(6.0, 2.0)
    assert [v.uv for v in model.vertices] == [
        (0.0, 1.0),
        (0.0, 0.0),
        (1.0, 1.0),
        (1.0, 0.0),
    ]


@pytest.mark.parametrize("width,height", [(6.0, 2.0), (15.0, 5.0), (8.0, 4.0)])
def test_rect_extent_matches_size(width, height):
    model = RectModel(width, height)
    xs = [v.position[0] for v in model.vertices]
    ys = [v.position[1] for v in model.vertices]
    assert max(xs) - min(xs) == pytest.approx(width)
    assert max(ys) - min(ys) == pytest.approx(height)
    assert sum(xs) == pytest.approx(0.0)
    assert sum(ys) == pytest.approx(0.0)
    assert all(v.position[2] == 0.0 for v in model.vertices)


def test_texture_is_assignable():
    model = RectModel(2.0, 2.0)
    assert model.texture is None
    texture = Texture(1, 1, b"\x01\x02\x03\xff")
    model.texture = texture
    assert model.texture is texture


def test_vertex_is_immutable():
    vertex = Vertex((1.0, 2.0, 3.0), (0.25, 0.75))
    with pytest.raises(AttributeError):
        vertex.uv = (1.0, 1.0)
    assert vertex.uv == (0.25, 0.75)
    assert vertex.position == (1.0, 2.0, 3.0)