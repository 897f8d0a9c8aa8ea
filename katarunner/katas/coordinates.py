"""Coordinates in two, three and four dimensions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Coordinate:
    x: int
    y: int


@dataclass(frozen=True)
class Coordinate3D:
    x: int
    y: int
    z: int

    def as_2d(self) -> Coordinate:
        """Drop the third dimension."""
        return coord(self.x, self.y)


@dataclass(frozen=True)
class Coordinate4D:
    x: int
    y: int
    z: int
    t: int

    def as_3d(self) -> Coordinate3D:
        """Drop the time dimension."""
        return coord(self.x, self.y, self.z)


AnyCoordinate = Union[Coordinate, Coordinate3D, Coordinate4D]
_BY_ARITY = {2: Coordinate, 3: Coordinate3D, 4: Coordinate4D}


def coord(*args: int) -> AnyCoordinate:
    """A coordinate with as many dimensions as there are arguments (2 to 4)."""
    try:
        kind = _BY_ARITY[len(args)]
    except KeyError:
        raise ValueError(f"no rule takes {len(args)} values") from None
    return kind(*args)


def main() -> None:
    four_dim = coord(1, 2, 3, 1000)
    three_dim = four_dim.as_3d()
    two_dim = three_dim.as_2d()
    print(two_dim)


if __name__ == "__main__":
    main()