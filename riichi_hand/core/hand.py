"""Hand management - closed tiles and declared melds."""

from typing import List

from .tile import check_kind, kinds_to_histogram
from .meld import Meld


class Hand:
    """A player's hand as seen by the analyzer.

    Attributes:
        closed_kinds: Kinds of the tiles in hand (not melded)
        melds: Open/closed melds
    """

    def __init__(self, closed_kinds=None, melds=None):
        self.closed_kinds: List[int] = list(closed_kinds or [])
        self.melds: List[Meld] = list(melds or [])
        for k in self.closed_kinds:
            check_kind(k)

    @classmethod
    def from_34_array(cls, tiles_34: List[int], melds=None) -> 'Hand':
        kinds = []
        for k, count in enumerate(tiles_34):
            kinds.extend([k] * count)
        return cls(kinds, melds)

    def draw(self, kind: int):
        """Add a tile to the closed part."""
        check_kind(kind)
        self.closed_kinds.append(kind)

    def discard(self, kind: int):
        """Remove one tile of this kind from the closed part."""
        self.closed_kinds.remove(kind)

    def add_meld(self, meld: Meld):
        """Add a meld to the hand."""
        self.melds.append(meld)

    def to_34_array(self, include_melds: bool = False) -> List[int]:
        """Convert closed tiles (and optionally melded ones) to 34-length count array."""
        tiles_34 = kinds_to_histogram(self.closed_kinds)
        if include_melds:
            for meld in self.melds:
                for k in meld.kinds:
                    tiles_34[k] += 1
        return tiles_34

    @property
    def is_menzen(self) -> bool:
        """Whether hand is fully closed (門前)."""
        return all(not m.is_open for m in self.melds)

    @property
    def total_tiles(self) -> int:
        """Closed tiles plus three per meld (a kan's fourth tile is a replacement)."""
        return len(self.closed_kinds) + 3 * len(self.melds)
