"""
wangfill - Wang ID

Per-direction color signature of a cell. Slot i holds the color seen in
direction i (N, NE, E, SE, S, SW, W, NW); color 0 means the slot is
undefined and acts as a wildcard when matching.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from .constants import INDEX_NAMES, MAX_COLOR, NUM_INDEXES, UNDEFINED_COLOR

FULL_MASK = (1 << NUM_INDEXES) - 1


def opposite_index(index: int) -> int:
    """Get the slot facing back at a neighbor in direction `index`."""
    return (index + 4) % NUM_INDEXES


def is_corner(index: int) -> bool:
    """Odd slots are corners, even slots are edges."""
    return index % 2 == 1


@dataclass(frozen=True)
class WangId:
    """
    Immutable 8-slot color signature.

    All "mutating" operations return a new WangId. The packed integer form
    (one nibble per slot, slot 0 in the lowest nibble) is available through
    from_int() / to_int() for compact storage and hashing.
    """

    colors: tuple[int, ...] = (UNDEFINED_COLOR,) * NUM_INDEXES

    def __post_init__(self):
        colors = tuple(self.colors)
        if len(colors) != NUM_INDEXES:
            raise ValueError(
                f"WangId needs {NUM_INDEXES} colors, got {len(colors)}: {colors}"
            )
        for index, color in enumerate(colors):
            if not isinstance(color, int) or not 0 <= color <= MAX_COLOR:
                raise ValueError(
                    f"Invalid color {color!r} at slot {INDEX_NAMES[index]} "
                    f"(expected 0-{MAX_COLOR})"
                )
        object.__setattr__(self, "colors", colors)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def undefined(cls) -> WangId:
        return cls()

    @classmethod
    def uniform(cls, color: int) -> WangId:
        """WangId with the same color in every slot."""
        return cls((color,) * NUM_INDEXES)

    @classmethod
    def from_int(cls, value: int) -> WangId:
        if not 0 <= value < (1 << (4 * NUM_INDEXES)):
            raise ValueError(f"Packed WangId out of range: {value:#x}")
        return cls(tuple((value >> (4 * i)) & 0xF for i in range(NUM_INDEXES)))

    @classmethod
    def from_surrounding(cls, wang_ids: Sequence[Optional[WangId]]) -> WangId:
        """
        Build the WangId a cell needs to fit between its 8 neighbors.

        Slot i takes neighbor i's color on the side facing back at the cell.
        Missing neighbors (None) leave the slot undefined.

        Args:
            wang_ids: 8 neighbor WangIds ordered like the slots

        Returns:
            Merged WangId
        """
        if len(wang_ids) != NUM_INDEXES:
            raise ValueError(f"Expected {NUM_INDEXES} neighbors, got {len(wang_ids)}")

        colors = []
        for index, neighbor in enumerate(wang_ids):
            if neighbor is None:
                colors.append(UNDEFINED_COLOR)
            else:
                colors.append(neighbor.color(opposite_index(index)))
        return cls(tuple(colors))

    def to_int(self) -> int:
        value = 0
        for index, color in enumerate(self.colors):
            value |= color << (4 * index)
        return value

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def color(self, index: int) -> int:
        return self.colors[index]

    def is_defined(self, index: int) -> bool:
        return self.colors[index] != UNDEFINED_COLOR

    @property
    def mask(self) -> int:
        """Bitmask with bit i set when slot i is defined."""
        mask = 0
        for index, color in enumerate(self.colors):
            if color != UNDEFINED_COLOR:
                mask |= 1 << index
        return mask

    @property
    def is_complete(self) -> bool:
        return self.mask == FULL_MASK

    @property
    def is_empty(self) -> bool:
        return self.mask == 0

    def defined_indexes(self) -> Iterable[int]:
        return (i for i, c in enumerate(self.colors) if c != UNDEFINED_COLOR)

    def compatible_at(self, other: WangId, index: int) -> bool:
        """Both slots undefined, or both defined with the same color."""
        return self.colors[index] == other.colors[index]

    def matches(self, other: WangId) -> bool:
        """
        Check whether two WangIds agree wherever both are defined.

        Undefined slots on either side match anything.
        """
        for a, b in zip(self.colors, other.colors):
            if a != UNDEFINED_COLOR and b != UNDEFINED_COLOR and a != b:
                return False
        return True

    def masked_equals(self, other: WangId, mask: int) -> bool:
        """Slot-wise equality restricted to the slots set in `mask`."""
        for index in range(NUM_INDEXES):
            if mask & (1 << index) and self.colors[index] != other.colors[index]:
                return False
        return True

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    def with_color(self, index: int, color: int) -> WangId:
        colors = list(self.colors)
        colors[index] = color
        return WangId(tuple(colors))

    def merge_from_adjacent(self, adjacent: WangId, direction: int) -> WangId:
        """
        Take the color `adjacent` shows toward this cell into slot `direction`.

        An undefined color on the adjacent side leaves the slot as it was.

        Args:
            adjacent: WangId of the neighbor lying in `direction`
            direction: Slot index pointing at the neighbor

        Returns:
            New WangId
        """
        color = adjacent.color(opposite_index(direction))
        if color == UNDEFINED_COLOR:
            return self
        return self.with_color(direction, color)

    def update_to_adjacent(self, placed: WangId, direction: int) -> WangId:
        """
        Overwrite slot `direction` with the color a placed neighbor shows.

        Unlike merge_from_adjacent, an undefined color is copied too.
        """
        return self.with_color(direction, placed.color(opposite_index(direction)))

    def __str__(self) -> str:
        return ",".join(str(c) for c in self.colors)
