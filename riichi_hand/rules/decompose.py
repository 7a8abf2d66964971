"""Decomposition of a winning hand into blocks (mentsu / jantai).

A block is a list of kinds: [k, k, k] for a koutsu, [k, k+1, k+2] for a
shuntsu, [k, k] for the head. A decomposition is a list of blocks whose
tile count equals the hand size; thirteen orphans is reported as a single
flat block holding every tile.

The standard form is searched with two extraction orders per candidate
head (koutsu first, then shuntsu first). That covers the parses that
matter for scoring (sanankou vs. iipeikou style readings) without a full
enumeration.
"""

import logging
from enum import Enum
from typing import List, Optional

from riichi_hand.core.tile import (
    HONOR_INDICES, HONOR_START, can_start_sequence, check_histogram,
    is_yaochu, suit_of,
)
from riichi_hand.rules.agari import (
    is_complete_seven_pairs, is_complete_standard,
    is_complete_thirteen_orphans,
)

logger = logging.getLogger(__name__)

Block = List[int]
Decomposition = List[Block]


class BlockType(Enum):
    PAIR = "pair"            # 雀頭 / 対子
    TRIPLET = "triplet"      # 刻子
    SEQUENCE = "sequence"    # 順子
    QUAD = "quad"            # 槓子 (declared melds only)
    ORPHANS = "orphans"      # 国士無双 pseudo-block


def classify_block(block: Block) -> Optional[BlockType]:
    """Return the block's shape, or None if it is not a valid block."""
    if len(block) == 14 and all(is_yaochu(k) for k in block):
        return BlockType.ORPHANS
    if len(set(block)) == 1:
        return {2: BlockType.PAIR, 3: BlockType.TRIPLET, 4: BlockType.QUAD}.get(len(block))
    if len(block) == 3:
        a, b, c = sorted(block)
        if can_start_sequence(a) and b == a + 1 and c == a + 2:
            return BlockType.SEQUENCE
    return None


def is_proper_set(kinds) -> bool:
    """Whether kinds form a callable set: 2-4 identical kinds or a shuntsu."""
    kinds = sorted(kinds)
    if len(kinds) < 2 or len(kinds) > 4:
        return False
    if len(set(kinds)) == 1:
        return True
    if len(kinds) != 3 or kinds[0] >= HONOR_START:
        return False
    return (kinds[1] - kinds[0] == 1 and kinds[2] - kinds[1] == 1
            and suit_of(kinds[0]) == suit_of(kinds[2]))


def block_signature(block: Block) -> str:
    return "|" + ",".join(str(k) for k in block) + "|"


def decomposition_signature(decomposition: Decomposition) -> str:
    """Canonical key: block order inside a decomposition does not matter."""
    return "#".join(sorted(block_signature(b) for b in decomposition))


def signature_of_all(decompositions: List[Decomposition]) -> str:
    return "$".join(decomposition_signature(d) for d in decompositions)


def deduplicate(decompositions: List[Decomposition]) -> List[Decomposition]:
    """Drop decompositions with an already-seen signature, keeping first-found order."""
    seen = set()
    result = []
    for d in decompositions:
        key = decomposition_signature(d)
        if key in seen:
            continue
        seen.add(key)
        result.append(d)
    return result


def find_triplets(tiles: List[int]) -> List[Block]:
    """Pull every koutsu whose removal keeps the rest a valid standard hand.

    Mutates tiles: pulled koutsu stay removed.
    """
    found = []
    for i in range(len(tiles)):
        if tiles[i] < 3:
            continue
        tiles[i] -= 3
        if is_complete_standard(tiles):
            found.append([i, i, i])
        else:
            tiles[i] += 3
    return found


def find_sequences(tiles: List[int]) -> List[Block]:
    """Pull shuntsu left to right while the rest stays a valid standard hand.

    Mutates tiles: pulled shuntsu stay removed.
    """
    found = []
    for i in range(HONOR_START):
        if not can_start_sequence(i):
            continue
        while tiles[i] >= 1 and tiles[i + 1] >= 1 and tiles[i + 2] >= 1:
            tiles[i] -= 1
            tiles[i + 1] -= 1
            tiles[i + 2] -= 1
            if is_complete_standard(tiles):
                found.append([i, i + 1, i + 2])
            else:
                tiles[i] += 1
                tiles[i + 1] += 1
                tiles[i + 2] += 1
                break
    return found


def find_pair(tiles: List[int], exclude: int = -1) -> int:
    """Index of the first kind held at least twice (other than exclude), or -1."""
    for i in range(len(tiles)):
        if tiles[i] >= 2 and i != exclude:
            return i
    return -1


def _leftover(tiles: List[int], placeholder: int) -> int:
    """Real tiles not yet assigned to a block."""
    total = sum(tiles)
    if placeholder != -1:
        total -= 2
    return total


def _split(tiles: List[int], head: int, placeholder: int) -> List[Decomposition]:
    """Both extraction orders for one head; tiles has the head removed and
    the placeholder pair added."""
    result = []

    # koutsu first, then shuntsu
    work = list(tiles)
    blocks = find_triplets(work)
    if _leftover(work, placeholder) > 0:
        blocks.extend(find_sequences(work))
    if _leftover(work, placeholder) == 0:
        result.append(blocks + [[head, head]])

    # shuntsu first, then koutsu
    work = list(tiles)
    blocks = find_sequences(work)
    if _leftover(work, placeholder) > 0:
        blocks.extend(find_triplets(work))
    if _leftover(work, placeholder) == 0:
        result.append(blocks + [[head, head]])

    return result


def find_all_decompositions(tiles_34: List[int]) -> List[Decomposition]:
    """Find every distinct way to split a complete hand into blocks.

    Returns [] for a hand that is not complete under any form.
    """
    check_histogram(tiles_34)
    can_be_kokushi = is_complete_thirteen_orphans(tiles_34)
    can_be_chiitoi = is_complete_seven_pairs(tiles_34)
    can_be_standard = is_complete_standard(tiles_34)
    if not (can_be_kokushi or can_be_chiitoi or can_be_standard):
        return []

    # Only the head left in the closed part, melds are accounted for elsewhere
    if sum(tiles_34) == 2:
        head = find_pair(tiles_34)
        return [[[head, head]]] if head != -1 else []

    results: List[Decomposition] = []

    if can_be_kokushi:
        flat = []
        for i, count in enumerate(tiles_34):
            flat.extend([i] * min(count, 2))
        results.append([flat])

    tiles = list(tiles_34)

    # Taking a candidate head out leaves 3n tiles, which is_complete_standard
    # rejects; an absent honor held twice keeps the count at 3n+2.
    placeholder = -1
    for i in HONOR_INDICES:
        if tiles[i] == 0:
            placeholder = i
            tiles[i] += 2
            break

    for i in range(len(tiles)):
        if i == placeholder or tiles[i] < 2:
            continue
        tiles[i] -= 2
        if is_complete_standard(tiles):
            found = _split(tiles, i, placeholder)
            logger.debug(f"head {i}: {len(found)} decomposition(s)")
            results.extend(found)
        tiles[i] += 2

    if placeholder != -1:
        tiles[placeholder] -= 2

    if can_be_chiitoi:
        results.append([[i, i] for i in range(len(tiles)) if tiles[i] == 2])

    return deduplicate(results)
