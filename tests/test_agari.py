"""Tests for agari.py"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from riichi_hand.core.tile import histogram_from_string
from riichi_hand.rules.agari import (
    is_complete_any, is_complete_seven_pairs, is_complete_standard,
    is_complete_thirteen_orphans, get_agari_type, get_waiting_tiles,
)


def make_34(s: str):
    return histogram_from_string(s)


# (hand, standard, seven pairs, thirteen orphans)
FORM_CASES = [
    ([2, 2, 0, 2, 0, 0, 2, 2, 2,
      0, 0, 2, 0, 0, 0, 0, 0, 0,
      0, 0, 0, 0, 0, 0, 0, 0, 0,
      0, 0, 0, 0, 0, 0, 0], False, True, False),
    ([1, 0, 0, 0, 0, 0, 0, 0, 1,
      1, 0, 0, 0, 0, 0, 0, 0, 1,
      1, 0, 0, 0, 0, 0, 0, 0, 1,
      1, 2, 1, 1, 1, 1, 1], False, False, True),
    ([0, 0, 0, 0, 0, 2, 2, 2, 0,
      0, 0, 0, 0, 0, 0, 1, 1, 1,
      0, 0, 2, 0, 0, 0, 0, 0, 0,
      0, 0, 0, 0, 0, 3, 0], True, False, False),
    ([2, 2, 2, 2, 0, 0, 2, 2, 2,
      0, 0, 0, 0, 0, 0, 0, 0, 0,
      0, 0, 0, 0, 0, 0, 0, 0, 0,
      0, 0, 0, 0, 0, 0, 0], True, True, False),
]


class TestForms:
    @pytest.mark.parametrize("tiles,standard,chiitoi,kokushi", FORM_CASES)
    def test_each_form(self, tiles, standard, chiitoi, kokushi):
        assert is_complete_standard(tiles) == standard
        assert is_complete_seven_pairs(tiles) == chiitoi
        assert is_complete_thirteen_orphans(tiles) == kokushi
        assert is_complete_any(tiles)

    def test_input_untouched(self):
        tiles = make_34("111m444m777m888m33p")
        before = list(tiles)
        is_complete_any(tiles)
        assert tiles == before


class TestStandard:
    @pytest.mark.parametrize("hand", [
        "111m444m777m888m33p",
        "123m456p789s東東東南南",
        "11122233344455m",
        "11112233m",            # melds called
        "55p",
        "99m",
        "東東東白白",
    ])
    def test_complete(self, hand):
        assert is_complete_standard(make_34(hand))

    @pytest.mark.parametrize("hand", [
        "123m456p789s東東東南西",
        "1m",
        "1234m",
        "789m1p11s",            # no wrap from 9m into 1p
        "89m12p東東",
        "東南西東南西北北",      # honors cannot run
        "東東東東南南南南",      # honor quad is not a closed block
        "1199m1199p1199s東東",
    ])
    def test_incomplete(self, hand):
        assert not is_complete_standard(make_34(hand))

    def test_suit_residue(self):
        # 1m left alone in a suit holding 3n+1 tiles
        assert not is_complete_standard(make_34("1234m567p東東"))

    def test_too_many_tiles_is_fatal(self):
        with pytest.raises(AssertionError):
            is_complete_standard(make_34("111222333444m555p"))


class TestSpecialForms:
    def test_seven_pairs_needs_distinct_kinds(self):
        assert is_complete_seven_pairs(make_34("1199m1199p1199s東東"))
        assert not is_complete_seven_pairs(make_34("1111m99p1199s東東白白"))

    def test_seven_pairs_needs_14(self):
        assert not is_complete_seven_pairs(make_34("1199m1199p11s"))

    def test_thirteen_orphans(self):
        assert is_complete_thirteen_orphans(make_34("19m19p19s東東南西北白發中"))
        assert is_complete_thirteen_orphans(make_34("19m19p19s東南西北白發中中"))
        # 13 different, no pair
        assert not is_complete_thirteen_orphans(make_34("19m19p19s東南西北白發中"))
        # 2m in place of the pair
        assert not is_complete_thirteen_orphans(make_34("129m19p19s東南西北白發中"))


class TestAgariType:
    def test_kinds(self):
        assert get_agari_type(make_34("19m19p19s東東南西北白發中")) == 'kokushi'
        assert get_agari_type(make_34("1199m1199p1199s東東")) == 'chiitoi'
        assert get_agari_type(make_34("123m456p789s東東東南南")) == 'standard'
        assert get_agari_type(make_34("123m456p789s東東東南西")) is None

    def test_ryanpeikou_reads_as_both(self):
        tiles = make_34("223344m556677p東東")
        assert get_agari_type(tiles) == 'chiitoi'
        assert get_agari_type(tiles, use_chiitoitsu=False) == 'standard'

    def test_disabled_forms(self):
        assert get_agari_type(make_34("1199m1199p1199s東東"), use_chiitoitsu=False) is None
        assert get_agari_type(make_34("19m19p19s東東南西北白發中"), use_kokushi=False) is None


class TestWaitingTiles:
    def test_nobetan(self):
        assert get_waiting_tiles(make_34("1234m567p東東東南南南")) == [0, 3]

    def test_shanpon(self):
        assert get_waiting_tiles(make_34("111m444m777m88m33p")) == [7, 11]

    def test_kokushi_13_sided(self):
        waits = get_waiting_tiles(make_34("19m19p19s東南西北白發中"))
        assert len(waits) == 13

    def test_held_four_times_is_not_a_wait(self):
        # 1111m234m: the 1m tanki would be a fifth copy
        assert get_waiting_tiles(make_34("1111m234m456p789s")) == [3]

    def test_wrong_size(self):
        assert get_waiting_tiles(make_34("123m456p789s東東東南南")) == []
