"""Tagged-variant dispatch with plain factory functions instead of classes, on a 'kind' subtyping key."""

import math
from dataclasses import dataclass, field
from typing import Callable, List, Tuple, Union

from pojopoly import Capability
from typing_extensions import Literal, Protocol, TypedDict


@dataclass
class FakeCanvas:
    """Stands in for a real drawing context; records every call made on it."""

    calls: List[str] = field(default_factory=list)

    def arc(self, x: float, y: float, radius: float, start: float, end: float) -> None:
        self.calls.append(f'arc({x}, {y}, {radius}, {start}, {end:.2f})')

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self.calls.append(f'rect({x}, {y}, {w}, {h})')


class DrawableImpl(Protocol):
    def draw(self, ctx: FakeCanvas) -> FakeCanvas: ...


class Point(TypedDict):
    x: float
    y: float


class Circle(TypedDict):
    kind: Literal['circle']
    pos: Point
    radius: float


class Rect(TypedDict):
    kind: Literal['rect']
    pos: Point
    size: Point


Drawer = Union[Circle, Rect]

Drawable = Capability[DrawableImpl]('MyApp.Drawable', 'kind')


class _Draw:
    """Adapts a draw function to the DrawableImpl interface."""

    def __init__(self, fn: Callable[[FakeCanvas], FakeCanvas]) -> None:
        self.draw = fn


@Drawable.variant('circle')
def drawable_for_circle(circle: Circle) -> DrawableImpl:
    def draw(ctx: FakeCanvas) -> FakeCanvas:
        ctx.arc(circle['pos']['x'], circle['pos']['y'], circle['radius'], 0, 2 * math.pi)
        return ctx

    return _Draw(draw)


@Drawable.variant('rect')
def drawable_for_rect(rect: Rect) -> DrawableImpl:
    def draw(ctx: FakeCanvas) -> FakeCanvas:
        ctx.rect(rect['pos']['x'], rect['pos']['y'], rect['size']['x'], rect['size']['y'])
        return ctx

    return _Draw(draw)


def draw(drawer: Drawer, ctx: FakeCanvas) -> FakeCanvas:
    return Drawable.resolve(drawer).draw(ctx)


if __name__ == '__main__':
    shapes: Tuple[Drawer, ...] = (
        {'kind': 'rect', 'pos': {'x': 1, 'y': 2}, 'size': {'x': 11, 'y': 12}},
        {'kind': 'circle', 'pos': {'x': 0, 'y': 0}, 'radius': 5},
    )
    canvas = FakeCanvas()
    for shape in shapes:
        draw(shape, canvas)
    print('\n'.join(canvas.calls))  # noqa: T201 (this is an example)
