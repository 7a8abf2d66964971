"""Tile kinds (34 encoding) and the per-kind count array used by every algorithm.

Kinds 0-8 are 1m-9m, 9-17 are 1p-9p, 18-26 are 1s-9s and 27-33 are the
honors 東南西北白發中. Sequences never cross a suit boundary and never start
at 8 or 9, so the suit-major ordering is relied on everywhere.
"""

from enum import IntEnum
from typing import Iterable, List


NUM_KINDS = 34
HONOR_START = 27
MAX_COPIES = 4
MAX_HAND_SIZE = 14


class TileSuit(IntEnum):
    MAN = 0    # 万子
    PIN = 1    # 筒子
    SOU = 2    # 索子
    HONOR = 3  # 字牌


# Yaochu (terminal + honor) tile indices in 34 encoding
YAOCHU_INDICES = [0, 8, 9, 17, 18, 26, 27, 28, 29, 30, 31, 32, 33]
HONOR_INDICES = [27, 28, 29, 30, 31, 32, 33]

# Tile names for 34 encoding
TILE_NAMES_34 = [
    "1m", "2m", "3m", "4m", "5m", "6m", "7m", "8m", "9m",
    "1p", "2p", "3p", "4p", "5p", "6p", "7p", "8p", "9p",
    "1s", "2s", "3s", "4s", "5s", "6s", "7s", "8s", "9s",
    "東", "南", "西", "北", "白", "發", "中",
]

_SUIT_OFFSETS = {'m': 0, 'p': 9, 's': 18, 'z': 27}

# Honor letters accepted by the shorthand parser (P = haku, F = hatsu, C = chun)
_HONOR_CHARS = {
    '東': 27, '南': 28, '西': 29, '北': 30, '白': 31, '發': 32, '中': 33,
    'E': 27, 'S': 28, 'W': 29, 'N': 30, 'P': 31, 'F': 32, 'C': 33,
}


def check_kind(kind: int):
    """Guard against a kind index outside 0..33 (caller bug, not bad data)."""
    assert 0 <= kind < NUM_KINDS, f"kind must be 0..33, got {kind}"


def check_histogram(tiles_34: List[int]):
    """Guard the shape of a 34-array: length, per-kind bounds, hand size."""
    assert len(tiles_34) == NUM_KINDS, f"expected 34 counts, got {len(tiles_34)}"
    for kind, count in enumerate(tiles_34):
        assert 0 <= count <= MAX_COPIES, f"bad count {count} for {TILE_NAMES_34[kind]}"
    total = sum(tiles_34)
    assert total <= MAX_HAND_SIZE, f"Too many tiles = {total}"


def suit_of(kind: int) -> TileSuit:
    check_kind(kind)
    return TileSuit(kind // 9) if kind < HONOR_START else TileSuit.HONOR


def number_of(kind: int) -> int:
    """1-9 for number tiles, 1-7 for honors (東=1 ... 中=7)."""
    check_kind(kind)
    if kind >= HONOR_START:
        return kind - HONOR_START + 1
    return kind % 9 + 1


def is_honor(kind: int) -> bool:
    check_kind(kind)
    return kind >= HONOR_START


def is_terminal(kind: int) -> bool:
    check_kind(kind)
    return kind < HONOR_START and kind % 9 in (0, 8)


def is_yaochu(kind: int) -> bool:
    """Terminal or honor."""
    return is_honor(kind) or is_terminal(kind)


def can_start_sequence(kind: int) -> bool:
    """Number tile 1-7: a sequence k, k+1, k+2 stays inside the suit."""
    check_kind(kind)
    return kind < HONOR_START and kind % 9 <= 6


def empty_histogram() -> List[int]:
    return [0] * NUM_KINDS


def hand_size(tiles_34: List[int]) -> int:
    return sum(tiles_34)


def slice_by_suit(tiles_34: List[int]) -> List[List[int]]:
    """Split into man(9), pin(9), sou(9) and honors(7); the slices are copies."""
    return [
        list(tiles_34[0:9]),
        list(tiles_34[9:18]),
        list(tiles_34[18:27]),
        list(tiles_34[27:34]),
    ]


def kinds_to_histogram(kinds: Iterable[int]) -> List[int]:
    """Convert a list of kinds to a 34-length count array."""
    arr = empty_histogram()
    for k in kinds:
        check_kind(k)
        arr[k] += 1
    return arr


def histogram_to_kinds(tiles_34: List[int]) -> List[int]:
    """Expand a 34-array back into a sorted list of kinds."""
    kinds = []
    for k, count in enumerate(tiles_34):
        kinds.extend([k] * count)
    return kinds


def tile_34_to_name(index34: int) -> str:
    """Get tile name from 34 encoding."""
    check_kind(index34)
    return TILE_NAMES_34[index34]


def histogram_from_string(s: str) -> List[int]:
    """Parse a shorthand string like '123m456p789s東東' into a 34-array.

    Honors can also be written as '1234567z' or with the letters
    E S W N (winds) and P F C (haku, hatsu, chun). Whitespace is ignored.
    """
    arr = empty_histogram()
    numbers = []
    for ch in s:
        if ch.isdigit():
            numbers.append(int(ch))
        elif ch in _SUIT_OFFSETS:
            if not numbers:
                raise ValueError(f"suit '{ch}' without numbers in {s!r}")
            for n in numbers:
                limit = 7 if ch == 'z' else 9
                if not 1 <= n <= limit:
                    raise ValueError(f"invalid tile {n}{ch} in {s!r}")
                arr[_SUIT_OFFSETS[ch] + n - 1] += 1
            numbers = []
        elif ch in _HONOR_CHARS:
            arr[_HONOR_CHARS[ch]] += 1
        elif ch.isspace():
            continue
        else:
            raise ValueError(f"unexpected character {ch!r} in {s!r}")
    if numbers:
        raise ValueError(f"trailing numbers without a suit in {s!r}")
    return arr


def histogram_to_string(tiles_34: List[int]) -> str:
    """Inverse of histogram_from_string, e.g. '123m456p789s東東'."""
    parts = []
    for suit_char, offset in (('m', 0), ('p', 9), ('s', 18)):
        digits = "".join(str(i + 1) * tiles_34[offset + i] for i in range(9))
        if digits:
            parts.append(digits + suit_char)
    for k in HONOR_INDICES:
        parts.append(TILE_NAMES_34[k] * tiles_34[k])
    return "".join(parts)
