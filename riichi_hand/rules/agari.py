"""Win (和了) detection - standard form, seven pairs, thirteen orphans.

All checks take a 34-array and never modify it. An incomplete hand is
simply not a win: every check returns False instead of raising.
"""

from typing import List, Optional

from riichi_hand.core.tile import (
    MAX_COPIES, YAOCHU_INDICES, check_histogram, slice_by_suit,
)


def is_complete_any(tiles_34: List[int]) -> bool:
    """Check if the 34-array represents a winning hand (any form)."""
    return (is_complete_seven_pairs(tiles_34) or
            is_complete_thirteen_orphans(tiles_34) or
            is_complete_standard(tiles_34))


def is_complete_seven_pairs(tiles_34: List[int]) -> bool:
    """Check seven pairs (七対子): only counts of exactly 2, 14 tiles in all."""
    total = 0
    for count in tiles_34:
        if count > 0 and count != 2:
            return False
        total += count
    return total == 14


def is_complete_thirteen_orphans(tiles_34: List[int]) -> bool:
    """Check thirteen orphans (国士無双).

    Every yaochu kind present and exactly 14 tiles among them, so one of
    them is doubled and nothing else can be in a 14-tile hand.
    """
    counts = [tiles_34[i] for i in YAOCHU_INDICES]
    return 0 not in counts and sum(counts) == 14


def is_complete_standard(tiles_34: List[int]) -> bool:
    """Check standard form (4 mentsu + 1 jantai, fewer mentsu with melds called).

    Each suit is checked on its own: a number suit holding 3n+1 tiles can
    never complete, and exactly one suit group (honors included) may hold
    3n+2 tiles, the one carrying the head.
    """
    check_histogram(tiles_34)
    groups = slice_by_suit(tiles_34)

    pair_groups = 0
    for group in groups:
        remainder = sum(group) % 3
        if remainder == 1:
            return False
        if remainder == 2:
            pair_groups += 1
    if pair_groups != 1:
        return False

    return (_reduce_group(groups[0], False) and
            _reduce_group(groups[1], False) and
            _reduce_group(groups[2], False) and
            _reduce_group(groups[3], True))


def _reduce_group(group: List[int], is_honor: bool) -> bool:
    """Whether one suit group (9 number kinds or 7 honors) breaks into mentsu
    plus at most one pair. Works on its own copy of the group."""
    tiles = list(group)
    total = sum(tiles)
    if total == 0:
        return True

    if total % 3 == 2:
        for i in range(len(tiles)):
            if tiles[i] < 2:
                continue
            tiles[i] -= 2
            if _reduce_group(tiles, is_honor):
                return True
            tiles[i] += 2
        return False

    for i in range(len(tiles)):
        if tiles[i] == 0:
            continue
        if tiles[i] == 3:
            tiles[i] = 0
            continue
        # Anything but a full triplet has to start sequences here
        if is_honor or i >= 7:
            return False
        if tiles[i] == 4:
            tiles[i] -= 3
        tiles[i + 1] -= tiles[i]
        tiles[i + 2] -= tiles[i]
        if tiles[i + 1] < 0 or tiles[i + 2] < 0:
            return False
        tiles[i] = 0

    return True


def get_agari_type(tiles_34: List[int], use_chiitoitsu: bool = True,
                   use_kokushi: bool = True) -> Optional[str]:
    """Determine the agari type: 'standard', 'chiitoi', 'kokushi', or None.

    A hand that is both seven pairs and standard (ryanpeikou shape) reports
    'chiitoi'; the decompositions carry both readings.
    """
    if use_kokushi and is_complete_thirteen_orphans(tiles_34):
        return 'kokushi'
    if use_chiitoitsu and is_complete_seven_pairs(tiles_34):
        return 'chiitoi'
    if is_complete_standard(tiles_34):
        return 'standard'
    return None


def get_waiting_tiles(tiles_34: List[int]) -> List[int]:
    """Find all tiles (34 indices) that would complete this hand.

    The hand should have 13 tiles (tenpai check) or appropriate for melds.
    Kinds already held four times are never a wait.
    """
    total = sum(tiles_34)
    if total % 3 != 1:
        return []

    waits = []
    for i in range(len(tiles_34)):
        if tiles_34[i] >= MAX_COPIES:
            continue
        test = list(tiles_34)
        test[i] += 1
        if is_complete_any(test):
            waits.append(i)
    return waits
