from typing import Tuple

from pojopoly import CapabilityMarker, DefCapabilityMarker
from typing_extensions import Literal, TypedDict

from tests.fixtures import array_obj, listable

# HELPERS ##################


class DrawableKey:
    pass


Drawable = CapabilityMarker[DrawableKey, Literal['kind'], Tuple[()]]


class Circle(TypedDict):
    kind: Literal['circle']
    radius: float


def takes_drawable(drawable: Drawable) -> Drawable:
    return drawable


# TESTS ####################


def test_alias():
    assert DefCapabilityMarker is CapabilityMarker


def test_generic_parameters():
    listable_of_int = listable.Listable[int]
    assert listable_of_int.__args__[0] is listable.ListableKey


def test_marker_has_no_runtime_footprint():
    circle: Circle = {'kind': 'circle', 'radius': 1.0}
    assert takes_drawable(circle) is circle
    assert circle == {'kind': 'circle', 'radius': 1.0}
    # records built by marker-annotated factories stay plain dicts
    ary = array_obj.create([1])
    assert type(ary) is dict
    assert set(ary) == {'type', 'ary'}
