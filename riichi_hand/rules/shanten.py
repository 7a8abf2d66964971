"""Shanten (向聴数) calculation.

Shanten = minimum number of tiles needed to reach tenpai (waiting to win).
-1 means already a complete hand (agari).
0 means tenpai (one tile away).

The standard form follows the tenhou.net counting: a depth-first search over
the 27 number kinds, with honors counted up front since they never form
shuntsu.
"""

from typing import List

from riichi_hand.core.tile import (
    HONOR_START, YAOCHU_INDICES, check_histogram,
)

AGARI_STATE = -1


def shanten(tiles_34: List[int], use_chiitoitsu: bool = True,
            use_kokushi: bool = True) -> int:
    """Calculate minimum shanten number across all hand forms."""
    results = [shanten_standard(tiles_34)]
    if use_chiitoitsu:
        results.append(shanten_chiitoi(tiles_34))
    if use_kokushi:
        results.append(shanten_kokushi(tiles_34))
    return min(results)


def shanten_standard(tiles_34: List[int]) -> int:
    """Shanten for standard form (4 mentsu + 1 jantai).

    A hand with fewer than 14 tiles counts (14 - n) // 3 melds as already
    called.
    """
    return Shanten().calculate(tiles_34)


def shanten_chiitoi(tiles_34: List[int]) -> int:
    """Shanten for seven pairs (七対子).

    Formula: 6 - (number of pairs), plus one for every missing kind when the
    hand holds fewer than 7 different kinds (a quad is only one pair).
    """
    pairs = sum(1 for c in tiles_34 if c >= 2)
    if pairs == 7:
        return AGARI_STATE

    kinds = sum(1 for c in tiles_34 if c >= 1)
    s = 6 - pairs
    if kinds < 7:
        s += 7 - kinds
    return s


def shanten_kokushi(tiles_34: List[int]) -> int:
    """Shanten for thirteen orphans (国士無双).

    Formula: 13 - (number of yaochu types) - (1 if any yaochu pair).
    """
    types = sum(1 for idx in YAOCHU_INDICES if tiles_34[idx] >= 1)
    has_pair = any(tiles_34[idx] >= 2 for idx in YAOCHU_INDICES)
    return 13 - types - (1 if has_pair else 0)


class Shanten:
    """Standard-form search state.

    The search owns a copy of the hand and mutates it in place; every
    _increase_* call is undone by the matching _decrease_* call before the
    caller returns, so after calculate() the buffer is back to the hand it
    started from.

    Attributes:
        tiles: working copy of the 34-array
        number_melds: completed mentsu (including called ones)
        number_tatsu: partial shuntsu (two-sided / edge / closed)
        number_pairs: pairs (head candidates, or toitsu as tatsu)
        number_jidahai: honor quads, each a meld that still strands a tile
        number_characters: bit i set when number kind i is held four times
            (bit 27 stands for honors)
        number_isolated_tiles: bit i set when kind i was left as a single
        min_shanten: best result so far
    """

    def __init__(self):
        self.tiles: List[int] = []
        self.number_melds = 0
        self.number_tatsu = 0
        self.number_pairs = 0
        self.number_jidahai = 0
        self.number_characters = 0
        self.number_isolated_tiles = 0
        self.min_shanten = 8

    def calculate(self, tiles_34: List[int]) -> int:
        check_histogram(tiles_34)
        self._init(tiles_34)

        count_of_tiles = sum(self.tiles)
        self._remove_character_tiles(count_of_tiles)

        init_mentsu = (14 - count_of_tiles) // 3
        self._scan(init_mentsu)
        return self.min_shanten

    def _init(self, tiles_34: List[int]):
        self.tiles = list(tiles_34)
        self.number_melds = 0
        self.number_tatsu = 0
        self.number_pairs = 0
        self.number_jidahai = 0
        self.number_characters = 0
        self.number_isolated_tiles = 0
        self.min_shanten = 8

    def _scan(self, init_mentsu: int):
        for i in range(HONOR_START):
            if self.tiles[i] == 4:
                self.number_characters |= 1 << i
        self.number_melds += init_mentsu
        self._run(0)

    def _run(self, depth: int):
        if self.min_shanten == AGARI_STATE:
            return

        while depth < HONOR_START and not self.tiles[depth]:
            depth += 1

        if depth >= HONOR_START:
            self._update_result()
            return

        # position inside the suit
        i = depth % 9

        if self.tiles[depth] == 4:
            self._increase_set(depth)
            if i < 7 and self.tiles[depth + 2]:
                if self.tiles[depth + 1]:
                    self._increase_shuntsu(depth)
                    self._run(depth + 1)
                    self._decrease_shuntsu(depth)
                self._increase_tatsu_second(depth)
                self._run(depth + 1)
                self._decrease_tatsu_second(depth)

            if i < 8 and self.tiles[depth + 1]:
                self._increase_tatsu_first(depth)
                self._run(depth + 1)
                self._decrease_tatsu_first(depth)

            self._increase_isolated_tile(depth)
            self._run(depth + 1)
            self._decrease_isolated_tile(depth)
            self._decrease_set(depth)
            self._increase_pair(depth)

            if i < 7 and self.tiles[depth + 2]:
                if self.tiles[depth + 1]:
                    self._increase_shuntsu(depth)
                    self._run(depth)
                    self._decrease_shuntsu(depth)
                self._increase_tatsu_second(depth)
                self._run(depth + 1)
                self._decrease_tatsu_second(depth)

            if i < 8 and self.tiles[depth + 1]:
                self._increase_tatsu_first(depth)
                self._run(depth + 1)
                self._decrease_tatsu_first(depth)

            self._decrease_pair(depth)

        elif self.tiles[depth] == 3:
            self._increase_set(depth)
            self._run(depth + 1)
            self._decrease_set(depth)
            self._increase_pair(depth)

            if i < 7 and self.tiles[depth + 1] and self.tiles[depth + 2]:
                self._increase_shuntsu(depth)
                self._run(depth + 1)
                self._decrease_shuntsu(depth)
            else:
                if i < 7 and self.tiles[depth + 2]:
                    self._increase_tatsu_second(depth)
                    self._run(depth + 1)
                    self._decrease_tatsu_second(depth)

                if i < 8 and self.tiles[depth + 1]:
                    self._increase_tatsu_first(depth)
                    self._run(depth + 1)
                    self._decrease_tatsu_first(depth)

            self._decrease_pair(depth)

            if i < 7 and self.tiles[depth + 2] >= 2 and self.tiles[depth + 1] >= 2:
                self._increase_shuntsu(depth)
                self._increase_shuntsu(depth)
                self._run(depth)
                self._decrease_shuntsu(depth)
                self._decrease_shuntsu(depth)

        elif self.tiles[depth] == 2:
            self._increase_pair(depth)
            self._run(depth + 1)
            self._decrease_pair(depth)
            if i < 7 and self.tiles[depth + 2] and self.tiles[depth + 1]:
                self._increase_shuntsu(depth)
                self._run(depth)
                self._decrease_shuntsu(depth)

        elif self.tiles[depth] == 1:
            if (i < 6 and self.tiles[depth + 1] == 1 and self.tiles[depth + 2]
                    and self.tiles[depth + 3] != 4):
                self._increase_shuntsu(depth)
                self._run(depth + 2)
                self._decrease_shuntsu(depth)
            else:
                self._increase_isolated_tile(depth)
                self._run(depth + 1)
                self._decrease_isolated_tile(depth)

                if i < 7 and self.tiles[depth + 2]:
                    if self.tiles[depth + 1]:
                        self._increase_shuntsu(depth)
                        self._run(depth + 1)
                        self._decrease_shuntsu(depth)
                    self._increase_tatsu_second(depth)
                    self._run(depth + 1)
                    self._decrease_tatsu_second(depth)

                if i < 8 and self.tiles[depth + 1]:
                    self._increase_tatsu_first(depth)
                    self._run(depth + 1)
                    self._decrease_tatsu_first(depth)

    def _update_result(self):
        ret_shanten = 8 - self.number_melds * 2 - self.number_tatsu - self.number_pairs
        n_mentsu_kouho = self.number_melds + self.number_tatsu

        if self.number_pairs:
            n_mentsu_kouho += self.number_pairs - 1
        elif self.number_characters and self.number_isolated_tiles:
            # every single left over is a kind already held four times:
            # no tile can be drawn to pair it
            if (self.number_characters | self.number_isolated_tiles) == self.number_characters:
                ret_shanten += 1

        if n_mentsu_kouho > 4:
            ret_shanten += n_mentsu_kouho - 4

        if ret_shanten != AGARI_STATE and ret_shanten < self.number_jidahai:
            ret_shanten = self.number_jidahai

        if ret_shanten < self.min_shanten:
            self.min_shanten = ret_shanten

    def _increase_set(self, k: int):
        self.tiles[k] -= 3
        self.number_melds += 1

    def _decrease_set(self, k: int):
        self.tiles[k] += 3
        self.number_melds -= 1

    def _increase_pair(self, k: int):
        self.tiles[k] -= 2
        self.number_pairs += 1

    def _decrease_pair(self, k: int):
        self.tiles[k] += 2
        self.number_pairs -= 1

    def _increase_shuntsu(self, k: int):
        self.tiles[k] -= 1
        self.tiles[k + 1] -= 1
        self.tiles[k + 2] -= 1
        self.number_melds += 1

    def _decrease_shuntsu(self, k: int):
        self.tiles[k] += 1
        self.tiles[k + 1] += 1
        self.tiles[k + 2] += 1
        self.number_melds -= 1

    def _increase_tatsu_first(self, k: int):
        self.tiles[k] -= 1
        self.tiles[k + 1] -= 1
        self.number_tatsu += 1

    def _decrease_tatsu_first(self, k: int):
        self.tiles[k] += 1
        self.tiles[k + 1] += 1
        self.number_tatsu -= 1

    def _increase_tatsu_second(self, k: int):
        self.tiles[k] -= 1
        self.tiles[k + 2] -= 1
        self.number_tatsu += 1

    def _decrease_tatsu_second(self, k: int):
        self.tiles[k] += 1
        self.tiles[k + 2] += 1
        self.number_tatsu -= 1

    def _increase_isolated_tile(self, k: int):
        self.tiles[k] -= 1
        self.number_isolated_tiles |= 1 << k

    def _decrease_isolated_tile(self, k: int):
        self.tiles[k] += 1
        self.number_isolated_tiles &= ~(1 << k)

    def _remove_character_tiles(self, nc: int):
        """Count honors up front: they only ever form koutsu or pairs."""
        number = 0
        isolated = 0

        for i in range(HONOR_START, 34):
            if self.tiles[i] == 4:
                self.number_melds += 1
                self.number_jidahai += 1
                number |= 1 << (i - HONOR_START)
                isolated |= 1 << (i - HONOR_START)
            elif self.tiles[i] == 3:
                self.number_melds += 1
            elif self.tiles[i] == 2:
                self.number_pairs += 1
            elif self.tiles[i] == 1:
                isolated |= 1 << (i - HONOR_START)

        if self.number_jidahai and nc % 3 == 2:
            self.number_jidahai -= 1

        if isolated:
            self.number_isolated_tiles |= 1 << HONOR_START
            if (number | isolated) == number:
                self.number_characters |= 1 << HONOR_START
