"""Hairi (有効牌) - which tiles move a hand closer to winning.

For a 13-tile hand (3n+1) the report lists the kinds whose draw lowers the
shanten. For a 14-tile hand (3n+2) it lists every discard that keeps the
current shanten, each with the kinds that would then lower it.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from riichi_hand.core.tile import MAX_COPIES, check_histogram
from riichi_hand.rules.shanten import AGARI_STATE, shanten


@dataclass
class HairiResult:
    """Useful-tile report.

    Attributes:
        current: shanten of the hand as given
        wait: kinds that lower the shanten (13-tile hands)
        waits_after_discard: (discarded kind, wait after that discard) for
            every discard that keeps the shanten (14-tile hands)
    """
    current: int
    wait: List[int] = field(default_factory=list)
    waits_after_discard: List[Tuple[int, List[int]]] = field(default_factory=list)

    def best_discards(self, tiles_34: List[int]) -> List[Tuple[int, int]]:
        """(discard, ukeire) pairs, widest acceptance first.

        tiles_34 is the hand the report was computed for, with the tiles of
        any declared melds added so their copies are not counted as live.
        """
        ranked = []
        for discard, wait in self.waits_after_discard:
            after = list(tiles_34)
            after[discard] -= 1
            ranked.append((discard, ukeire(after, wait)))
        ranked.sort(key=lambda x: (-x[1], x[0]))
        return ranked


def ukeire(tiles_34: List[int], wait: List[int]) -> int:
    """Number of wait tiles not already in the hand or its melds (受け入れ枚数)."""
    return sum(MAX_COPIES - tiles_34[k] for k in wait)


def hairi(tiles_34: List[int], use_chiitoitsu: bool = True,
          use_kokushi: bool = True) -> Optional[HairiResult]:
    """Useful tiles for a hand; None when the hand is already complete."""
    check_histogram(tiles_34)
    tiles = list(tiles_34)
    current = shanten(tiles, use_chiitoitsu, use_kokushi)
    if current == AGARI_STATE:
        return None

    def improving(skip: int) -> List[int]:
        waits = []
        for k in range(len(tiles)):
            if k == skip or tiles[k] >= MAX_COPIES:
                continue
            tiles[k] += 1
            if shanten(tiles, use_chiitoitsu, use_kokushi) < current:
                waits.append(k)
            tiles[k] -= 1
        return waits

    result = HairiResult(current=current)

    if sum(tiles) % 3 == 1:
        result.wait = improving(-1)
        return result

    for k in range(len(tiles)):
        if tiles[k] == 0:
            continue
        tiles[k] -= 1
        if shanten(tiles, use_chiitoitsu, use_kokushi) == current:
            result.waits_after_discard.append((k, improving(k)))
        tiles[k] += 1

    return result
