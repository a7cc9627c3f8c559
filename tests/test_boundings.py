import numpy as np
import pytest

from baamboo.boundings import BoundingBox, BoundingSphere


def test_default_sphere_is_unit_at_origin():
    sphere = BoundingSphere()
    np.testing.assert_allclose(sphere.center, np.zeros(3))
    assert sphere.radius == 1.0


def test_sphere_from_box_passes_through_corners():
    box = BoundingBox([-1.0, -2.0, -3.0], [3.0, 2.0, 1.0])
    sphere = BoundingSphere.from_box(box)
    np.testing.assert_allclose(sphere.center, (box.minimum + box.maximum) / 2)
    assert np.linalg.norm(box.minimum - sphere.center) == pytest.approx(sphere.radius)


def test_sphere_surrounds_points():
    sphere = BoundingSphere([0.0, 0.0, 0.0], 2.0)
    assert sphere.surrounds([1.0, 0.0, 0.0])
    assert sphere.surrounds([2.0, 0.0, 0.0])
    assert not sphere.surrounds([3.0, 0.0, 0.0])


def test_sphere_surrounds_spheres_and_boxes():
    big = BoundingSphere([0.0, 0.0, 0.0], 5.0)
    assert big.surrounds(BoundingSphere([1.0, 0.0, 0.0], 1.0))
    assert not big.surrounds(BoundingSphere([4.5, 0.0, 0.0], 1.0))
    assert big.surrounds(BoundingBox([-1.0, -1.0, -1.0], [1.0, 1.0, 1.0]))
    assert not big.surrounds(BoundingBox([-4.0, -4.0, -4.0], [4.0, 4.0, 4.0]))


def test_sphere_overlaps():
    a = BoundingSphere([0.0, 0.0, 0.0], 1.0)
    assert a.overlaps(BoundingSphere([1.5, 0.0, 0.0], 1.0))
    assert not a.overlaps(BoundingSphere([2.0, 0.0, 0.0], 1.0))
    assert a.overlaps(BoundingBox([0.5, 0.5, 0.5], [2.0, 2.0, 2.0]))


def test_sphere_overlaps_rejects_points():
    with pytest.raises(TypeError):
        BoundingSphere().overlaps([0.0, 0.0, 0.0])


def test_sphere_union_with_inner_point_keeps_sphere():
    sphere = BoundingSphere([1.0, 1.0, 1.0], 2.0)
    assert BoundingSphere.union(sphere, [1.5, 1.0, 1.0]) is sphere


def test_sphere_union_with_outer_point_holds_both():
    sphere = BoundingSphere([0.0, 0.0, 0.0], 1.0)
    point = np.array([4.0, 0.0, 0.0])
    merged = BoundingSphere.union(sphere, point)
    assert np.linalg.norm(merged.center - point) == pytest.approx(merged.radius)
    grown = BoundingSphere(merged.center, merged.radius + 1e-9)
    assert grown.surrounds(point)
    assert grown.surrounds(sphere)


def test_sphere_union_contained_returns_larger():
    big = BoundingSphere([0.0, 0.0, 0.0], 5.0)
    small = BoundingSphere([1.0, 0.0, 0.0], 1.0)
    assert BoundingSphere.union(big, small) is big
    assert BoundingSphere.union(small, big) is big


def test_sphere_union_of_disjoint_spheres():
    a = BoundingSphere([-2.0, 0.0, 0.0], 1.0)
    b = BoundingSphere([2.0, 0.0, 0.0], 1.0)
    merged = BoundingSphere.union(a, b)
    np.testing.assert_allclose(merged.center, (a.center + b.center) / 2, atol=1e-12)
    assert merged.radius == pytest.approx(3.0)


def test_sphere_transformed_by_translation_and_scale():
    sphere = BoundingSphere([1.0, 2.0, 3.0], 0.5)
    m = np.diag([2.0, 3.0, 4.0, 1.0])
    m[:3, 3] = [10.0, 20.0, 30.0]
    moved = sphere.transformed(m)
    np.testing.assert_allclose(moved.center, sphere.center + m[:3, 3])
    assert moved.radius == pytest.approx(4.0)
    np.testing.assert_allclose(sphere.center, [1.0, 2.0, 3.0])


def test_sphere_transformed_rejects_degenerate_matrix():
    m = np.eye(4)
    m[3, 3] = 0.0
    with pytest.raises(ValueError):
        BoundingSphere().transformed(m)


def test_box_from_point_is_degenerate():
    box = BoundingBox.from_point([1.0, 2.0, 3.0])
    np.testing.assert_allclose(box.minimum, [1.0, 2.0, 3.0])
    np.testing.assert_allclose(box.maximum, [1.0, 2.0, 3.0])


def test_box_from_sphere():
    sphere = BoundingSphere([1.0, 2.0, 3.0], 2.0)
    box = BoundingBox.from_sphere(sphere)
    np.testing.assert_allclose(box.minimum, sphere.center - sphere.radius)
    np.testing.assert_allclose(box.maximum, sphere.center + sphere.radius)


def test_box_surrounds_points_boxes_spheres():
    box = BoundingBox([-2.0, -2.0, -2.0], [2.0, 2.0, 2.0])
    assert box.surrounds([0.0, 1.0, -1.0])
    assert not box.surrounds([0.0, 3.0, 0.0])
    assert box.surrounds(BoundingBox([-1.0, -1.0, -1.0], [1.0, 1.0, 1.0]))
    assert not box.surrounds(BoundingBox([-1.0, -1.0, -1.0], [3.0, 1.0, 1.0]))
    assert box.surrounds(BoundingSphere([0.0, 0.0, 0.0], 1.0))
    assert not box.surrounds(BoundingSphere([1.5, 0.0, 0.0], 1.0))


@pytest.mark.parametrize("axis", [0, 1, 2])
def test_box_overlaps_fails_on_any_separated_axis(axis):
    a = BoundingBox([0.0, 0.0, 0.0], [1.0, 1.0, 1.0])
    lo = np.zeros(3)
    hi = np.ones(3)
    lo[axis] += 2.0
    hi[axis] += 2.0
    assert not a.overlaps(BoundingBox(lo, hi))
    assert not BoundingBox(lo, hi).overlaps(a)


def test_box_overlaps_touching_and_sphere():
    a = BoundingBox([0.0, 0.0, 0.0], [1.0, 1.0, 1.0])
    assert a.overlaps(BoundingBox([1.0, 1.0, 1.0], [2.0, 2.0, 2.0]))
    assert a.overlaps(BoundingSphere([1.5, 0.5, 0.5], 1.0))
    assert not a.overlaps(BoundingSphere([5.0, 5.0, 5.0], 1.0))


def test_box_union_holds_both():
    a = BoundingBox([0.0, 0.0, 0.0], [1.0, 1.0, 1.0])
    b = BoundingBox([-1.0, 0.5, 0.5], [0.5, 3.0, 0.7])
    merged = BoundingBox.union(a, b)
    assert merged.surrounds(a)
    assert merged.surrounds(b)
    np.testing.assert_allclose(merged.minimum, np.minimum(a.minimum, b.minimum))


def test_box_union_with_point():
    box = BoundingBox([0.0, 0.0, 0.0], [1.0, 1.0, 1.0])
    point = [5.0, -1.0, 0.5]
    merged = BoundingBox.union(box, point)
    assert merged.surrounds(point)
    assert merged.surrounds(box)


def test_equality():
    assert BoundingBox([0, 0, 0], [1, 1, 1]) == BoundingBox([0, 0, 0], [1, 1, 1])
    assert not (BoundingSphere([0, 0, 0], 1.0) == BoundingSphere([0, 0, 0], 2.0))