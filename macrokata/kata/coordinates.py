"""Coordinates in two, three and four dimensions."""

from __future__ import annotations

from dataclasses import dataclass, fields


class _DebugLayout:
    def __str__(self) -> str:
        body = ", ".join(f"{f.name}: {getattr(self, f.name)}" for f in fields(self))
        return f"Coordinate {{ {body} }}"


@dataclass(frozen=True)
class Coordinate2D(_DebugLayout):
    """A point in the plane."""

    x: int
    y: int


@dataclass(frozen=True)
class Coordinate3D(_DebugLayout):
    """A point in space."""

    x: int
    y: int
    z: int

    def as_2d(self) -> Coordinate2D:
        """Drop the third dimension."""
        return coord(self.x, self.y)


@dataclass(frozen=True)
class Coordinate4D(_DebugLayout):
    """A point in space and time."""

    x: int
    y: int
    z: int
    t: int

    def as_3d(self) -> Coordinate3D:
        """Drop the fourth dimension."""
        return coord(self.x, self.y, self.z)


_BY_DIMENSION = {2: Coordinate2D, 3: Coordinate3D, 4: Coordinate4D}


def coord(*args: int):
    """Build a coordinate with as many dimensions as there are arguments."""
    try:
        cls = _BY_DIMENSION[len(args)]
    except KeyError:
        raise TypeError(f"coord takes 2, 3 or 4 values, got {len(args)}") from None
    return cls(*args)


def run_hygienic_macros() -> None:
    """Reduce a 4D coordinate to 2D and print it."""
    four_dim = coord(1, 2, 3, 1000)
    three_dim = four_dim.as_3d()
    two_dim = three_dim.as_2d()
    print(two_dim)