import numpy as np
import pytest

from olafengine.colors import RGBA
from olafengine.raw_shapes import box_scale, cylinder_scale, cylinder_vertices
from olafengine.shapes import Box3D, Cylinder3D, Prism3D, ShapeAPI
from olafengine.transform import Mesh, Model, Transform, VertexBuffer, quat_from_euler


def make_model(pos=(1.0, 2.0, 3.0), scale=(2.0, 3.0, 4.0)):
    return Model(
        vb=VertexBuffer(vao=7, vbo=8, vertex_count=36),
        mesh=Mesh(shader=5, tex_id=2),
        transform=Transform(pos=pos, scale=scale, color=RGBA(0.5, 0.5, 0.5, 0.5)),
    )


def test_shape_takes_position_and_scale_from_model():
    shape = ShapeAPI(make_model())
    np.testing.assert_array_equal(shape.pos, [1.0, 2.0, 3.0])
    np.testing.assert_array_equal(shape.scale, [2.0, 3.0, 4.0])


def test_shape_colour_starts_white_regardless_of_model():
    shape = ShapeAPI(make_model())
    assert shape.color == RGBA(1.0, 1.0, 1.0, 1.0)


def test_to_model_round_trips_buffers_and_mesh():
    model = make_model()
    out = ShapeAPI(model).to_model()
    assert out.vb == model.vb
    assert out.mesh == model.mesh
    assert out.vb is not model.vb
    np.testing.assert_array_equal(out.transform.pos, model.transform.pos)
    np.testing.assert_array_equal(out.transform.scale, model.transform.scale)


def test_unrotated_shape_has_identity_quaternion():
    out = ShapeAPI(make_model()).to_model()
    np.testing.assert_allclose(out.transform.rotation, quat_from_euler([0, 0, 0]))


def test_rotations_accumulate_in_radians():
    shape = ShapeAPI(make_model())
    shape.rotate_x(90)
    shape.rotate_x(90)
    shape.rotate_y(45)
    shape.rotate_z(-30)
    np.testing.assert_allclose(shape.angles, np.radians([180, 45, -30]))
    np.testing.assert_allclose(
        shape.to_model().transform.rotation, quat_from_euler(np.radians([180, 45, -30]))
    )


def test_rotate_adds_all_axes_and_ignores_axis():
    a = ShapeAPI(make_model())
    b = ShapeAPI(make_model())
    a.rotate([10, 20, 30], [1, 0, 0])
    b.rotate([10, 20, 30], [0, 0, 1])
    np.testing.assert_allclose(a.angles, b.angles)
    np.testing.assert_allclose(a.angles, np.radians([10, 20, 30]))


def test_set_pos_and_move():
    shape = ShapeAPI(make_model())
    target = np.array([5.0, 0.0, 1.0])
    shape.set_pos(target)
    target[0] = 99.0
    np.testing.assert_array_equal(shape.pos, [5.0, 0.0, 1.0])
    shape.move((1, -1, 1))
    np.testing.assert_array_equal(shape.pos, [6.0, -1.0, 2.0])


def test_set_pos_rejects_wrong_length():
    with pytest.raises(ValueError):
        ShapeAPI(make_model()).set_pos((1.0, 2.0))


def test_model_matrix_places_shape():
    shape = ShapeAPI(make_model(pos=(0, 0, 0), scale=(1, 1, 1)))
    shape.set_pos((3, 4, 5))
    matrix = shape.to_model().transform.compose()
    np.testing.assert_allclose(matrix[:3, 3], [3, 4, 5])


def test_box_dimensions_alias_scale():
    box = Box3D(make_model(scale=box_scale(2, 3, 4)))
    assert (box.w, box.h, box.l) == (2.0, 3.0, 4.0)
    box.w = 7
    box.l = 9
    np.testing.assert_array_equal(box.scale, [7.0, 3.0, 9.0])


def test_box_clone_is_independent_copy():
    box = Box3D(make_model())
    box.move((1, 1, 1))
    copy = box.clone()
    assert isinstance(copy, Box3D)
    np.testing.assert_array_equal(copy.pos, box.pos)
    copy.move((10, 0, 0))
    copy.h = 100
    np.testing.assert_array_equal(box.pos, [2.0, 3.0, 4.0])
    assert box.h == 3.0


def test_prism_clone_keeps_dimensions():
    prism = Prism3D(make_model(scale=(0.5, 0.5, 0.5)))
    copy = prism.clone()
    assert isinstance(copy, Prism3D)
    assert (copy.w, copy.h, copy.l) == (prism.w, prism.h, prism.l)
    assert copy.to_model().mesh == prism.to_model().mesh


def test_cylinder_radius_and_length():
    cyl = Cylinder3D(make_model(scale=cylinder_scale(1.5, 6)))
    assert cyl.rad == 1.5
    assert cyl.l == 6.0
    cyl.rad = 2
    np.testing.assert_array_equal(cyl.scale, [2.0, 1.5, 6.0])


def test_cylinder_default_detail_vertex_count():
    assert Cylinder3D.DEFAULT_DETAIL == 12
    assert len(cylinder_vertices(Cylinder3D.DEFAULT_DETAIL)) == 26