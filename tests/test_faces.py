import pytest

from meshview.faces import Faces

TWO_FACES = [0, 1, 2, -1, 2, 3, 4, 0, -1]


@pytest.fixture
def faces():
    return Faces(0, TWO_FACES)


def test_counts(faces):
    assert faces.number_of_faces() == 2
    assert faces.number_of_corners() == len(TWO_FACES)


def test_vertex_count_covers_indices(faces):
    assert faces.number_of_vertices() == 5


def test_vertex_count_keeps_larger_given_value():
    assert Faces(10, TWO_FACES).number_of_vertices() == 10


def test_face_sizes(faces):
    assert faces.face_size(0) == 3
    assert faces.face_size(1) == 4


def test_first_corners(faces):
    assert faces.face_first_corner(0) == 0
    assert faces.face_first_corner(1) == 4


def test_face_vertices_match_array(faces):
    assert [faces.face_vertex(1, j) for j in range(faces.face_size(1))] == [2, 3, 4, 0]


def test_corner_face(faces):
    assert [faces.corner_face(c) for c in (0, 1, 2)] == [0, 0, 0]
    assert [faces.corner_face(c) for c in (4, 5, 6, 7)] == [1, 1, 1, 1]


def test_next_corner_is_cyclic(faces):
    assert faces.next_corner(0) == 1
    assert faces.next_corner(2) == 0
    assert faces.next_corner(7) == 4


def test_next_corner_cycle_length_equals_face_size(faces):
    for face in range(faces.number_of_faces()):
        start = faces.face_first_corner(face)
        corner, steps = faces.next_corner(start), 1
        while corner != start:
            assert faces.corner_face(corner) == face
            corner, steps = faces.next_corner(corner), steps + 1
        assert steps == faces.face_size(face)


def test_empty():
    empty = Faces(3, [])
    assert empty.number_of_faces() == 0
    assert empty.number_of_corners() == 0
    assert empty.number_of_vertices() == 3


def test_missing_final_separator():
    with pytest.raises(ValueError):
        Faces(0, [0, 1, 2])


@pytest.mark.parametrize("face", [-1, 2, 100])
def test_invalid_face(faces, face):
    with pytest.raises(IndexError):
        faces.face_size(face)
    with pytest.raises(IndexError):
        faces.face_first_corner(face)


def test_invalid_face_vertex(faces):
    with pytest.raises(IndexError):
        faces.face_vertex(0, 3)
    with pytest.raises(IndexError):
        faces.face_vertex(0, -1)


def test_separator_corner_rejected(faces):
    with pytest.raises(ValueError):
        faces.corner_face(3)
    with pytest.raises(ValueError):
        faces.next_corner(8)


def test_out_of_range_corner(faces):
    with pytest.raises(IndexError):
        faces.corner_face(len(TWO_FACES))
    with pytest.raises(IndexError):
        faces.next_corner(-1)