"""Tests for hairi.py"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from riichi_hand.core.tile import histogram_from_string
from riichi_hand.rules.hairi import HairiResult, hairi, ukeire
from riichi_hand.rules.shanten import shanten


def make_34(s: str):
    return histogram_from_string(s)


TENPAI_HAND = [
    2, 2, 2, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 1, 1, 1, 0, 0,
    0, 1, 1, 0, 0, 0, 2, 0, 0,
    0, 0, 0, 0, 0, 0, 0,
]

ONE_AWAY_HAND = [
    2, 2, 2, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 1, 1, 1, 0, 0,
    0, 1, 0, 0, 1, 2, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0,
]

RIICHI_HAND = [
    2, 2, 2, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 1, 1, 1, 0, 0,
    0, 0, 1, 1, 1, 1, 1, 0, 0,
    0, 0, 0, 0, 0, 0, 0,
]

PARTIAL_HAND = [
    2, 2, 3, 2, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0,
    1, 1, 1, 0, 2, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0,
]


class TestWait:
    def test_tenpai(self):
        result = hairi(TENPAI_HAND)
        assert result.current == 0
        assert result.wait == [18, 21]
        assert result.waits_after_discard == []

    def test_one_away(self):
        result = hairi(ONE_AWAY_HAND)
        assert result.current == 1
        assert result.wait == [18, 19, 20, 21, 22, 23, 24]

    def test_shanpon(self):
        result = hairi(make_34("111m444m777m88m33p"))
        assert result.current == 0
        assert result.wait == [7, 11]

    def test_every_listed_kind_improves(self):
        tiles = list(ONE_AWAY_HAND)
        result = hairi(tiles)
        for k in range(34):
            after = list(tiles)
            after[k] += 1
            improves = shanten(after) < result.current
            assert improves == (k in result.wait)

    def test_held_four_times_skipped(self):
        # 1111m: a fifth 1m is never a useful tile
        result = hairi(make_34("1111m234m456p789s"))
        assert 0 not in result.wait
        assert result.wait == [3]


class TestDiscards:
    def test_riichi_hand(self):
        result = hairi(RIICHI_HAND)
        assert result.current == 0
        assert result.wait == []
        assert result.waits_after_discard == [
            (20, [21, 24]),
            (21, [20]),
            (23, [24]),
            (24, [20, 23]),
        ]

    def test_partial_hand(self):
        result = hairi(PARTIAL_HAND)
        assert result.waits_after_discard == [
            (0, [1, 4]),
            (2, [0, 3, 22]),
            (3, [1, 4]),
        ]

    def test_discard_keeps_shanten(self):
        result = hairi(RIICHI_HAND)
        for discard, _ in result.waits_after_discard:
            after = list(RIICHI_HAND)
            after[discard] -= 1
            assert shanten(after) == result.current

    def test_best_discards(self):
        result = hairi(RIICHI_HAND)
        ranked = result.best_discards(RIICHI_HAND)
        # dropping 3s or 7s keeps a two-sided wait
        assert ranked == [(20, 6), (24, 6), (21, 3), (23, 3)]


class TestHairi:
    def test_complete_hand(self):
        assert hairi(make_34("123m456p789s東東東南南")) is None

    def test_input_untouched(self):
        tiles = list(PARTIAL_HAND)
        hairi(tiles)
        assert tiles == PARTIAL_HAND

    def test_forms_disabled(self):
        # one pair short of seven pairs; the standard form is further away
        tiles = make_34("1199m1199p1199s東")
        assert hairi(tiles).wait == [27]
        assert hairi(tiles, use_chiitoitsu=False).current > 0

    def test_ukeire(self):
        tiles = make_34("111m444m777m88m33p")
        assert ukeire(tiles, [7, 11]) == 4

    def test_result_defaults(self):
        result = HairiResult(current=2)
        assert result.wait == []
        assert result.waits_after_discard == []
