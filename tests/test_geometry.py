from bravoengine.geometry import Geometry


def test_cube_shape():
    geometry = Geometry()
    assert len(geometry.vertices) == 8
    assert len(geometry.indices) == 36
    assert all(0 <= i < len(geometry.vertices) for i in geometry.indices)


def test_geometry_type_is_cube():
    assert Geometry().geometry_type == "cube"


def test_bounds_span_unit_cube():
    geometry = Geometry()
    assert geometry.minimum == (-1.0, -1.0, -1.0)
    assert geometry.maximum == (1.0, 1.0, 1.0)


def test_bounding_box_matches_cube_vertices():
    geometry = Geometry()
    assert [v.position for v in geometry.bounding_box] == [
        v.position for v in geometry.vertices
    ]


def test_bounding_box_corner_layout():
    box = [v.position for v in Geometry().bounding_box]
    bottom, top = box[:4], box[4:]
    assert all(p[1] == -1.0 for p in bottom)
    assert all(p[1] == 1.0 for p in top)
    assert box[0][0] < box[1][0]
    assert box[0][2] > box[2][2]


def test_bounding_box_is_copied():
    geometry = Geometry()
    box = geometry.bounding_box
    box.clear()
    assert len(geometry.bounding_box) == 8


def test_bounding_box_indices_cover_all_corners():
    geometry = Geometry()
    assert len(geometry.bounding_box_indices) == 36
    assert set(geometry.bounding_box_indices) == set(range(8))