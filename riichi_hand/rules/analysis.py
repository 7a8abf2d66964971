"""Hand analysis - one call from a hand (closed tiles + melds) to everything
the scoring side needs: win check, decompositions with melds merged in,
shanten, and the useful-tile report when the hand is not complete.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from riichi_hand.core.hand import Hand
from riichi_hand.core.tile import MAX_HAND_SIZE, histogram_to_string
from riichi_hand.rules.agari import get_agari_type
from riichi_hand.rules.decompose import (
    Decomposition, find_all_decompositions, is_proper_set,
)
from riichi_hand.rules.hairi import HairiResult, hairi
from riichi_hand.rules.shanten import shanten

logger = logging.getLogger(__name__)


class AnalysisConfig:
    """Analysis configuration."""

    def __init__(
        self,
        use_chiitoitsu: bool = True,  # 七対子
        use_kokushi: bool = True,     # 国士無双
        calc_hairi: bool = True,      # useful tiles when not complete
    ):
        self.use_chiitoitsu = use_chiitoitsu
        self.use_kokushi = use_kokushi
        self.calc_hairi = calc_hairi


@dataclass
class HandAnalysis:
    """Result of analyze_hand."""
    closed_34: List[int]
    melds: list
    visible_34: List[int]  # closed plus melded tiles, for counting what is left
    is_agari: bool
    agari_type: Optional[str]
    shanten: int
    decompositions: List[Decomposition] = field(default_factory=list)
    hairi: Optional[HairiResult] = None

    def to_dict(self) -> dict:
        """JSON-serialisable form."""
        data = {
            "hand": histogram_to_string(self.closed_34),
            "closed_34": list(self.closed_34),
            "melds": [
                {"type": m.meld_type.value, "kinds": list(m.kinds)}
                for m in self.melds
            ],
            "is_agari": self.is_agari,
            "agari_type": self.agari_type,
            "shanten": self.shanten,
            "decompositions": self.decompositions,
            "hairi": None,
        }
        if self.hairi is not None:
            data["hairi"] = {
                "current": self.hairi.current,
                "wait": self.hairi.wait,
                "waits_after_discard": [
                    {"discard": d, "wait": w}
                    for d, w in self.hairi.waits_after_discard
                ],
            }
        return data


def validate_hand(hand: Hand):
    """Reject hands no table could produce. Raises ValueError."""
    for meld in hand.melds:
        if not is_proper_set(meld.kinds) or len(meld.kinds) == 2:
            raise ValueError(f"Improper meld: {list(meld.kinds)}")
        if meld.is_kan != (len(meld.kinds) == 4):
            raise ValueError(f"Meld type {meld.meld_type.value} does not match {list(meld.kinds)}")

    closed = len(hand.closed_kinds)
    if closed % 3 == 0 or hand.total_tiles > MAX_HAND_SIZE:
        raise ValueError("Incorrect number of tiles")

    if max(hand.to_34_array(include_melds=True)) > 4:
        raise ValueError("More than four copies of a tile")


def analyze_hand(hand: Hand, config: Optional[AnalysisConfig] = None) -> HandAnalysis:
    """Analyze a hand: win check, decompositions, shanten and useful tiles."""
    if config is None:
        config = AnalysisConfig()
    validate_hand(hand)

    closed_34 = hand.to_34_array()
    # Seven pairs and thirteen orphans need all 14 tiles closed
    use_chiitoitsu = config.use_chiitoitsu and not hand.melds
    use_kokushi = config.use_kokushi and not hand.melds

    agari_type = get_agari_type(closed_34, use_chiitoitsu, use_kokushi)
    is_agari = agari_type is not None

    result = HandAnalysis(
        closed_34=closed_34,
        melds=list(hand.melds),
        visible_34=hand.to_34_array(include_melds=True),
        is_agari=is_agari,
        agari_type=agari_type,
        shanten=shanten(closed_34, use_chiitoitsu, use_kokushi),
    )
    logger.debug(f"{histogram_to_string(closed_34)} melds={len(hand.melds)} "
                 f"agari={is_agari} shanten={result.shanten}")

    if not is_agari or hand.total_tiles != MAX_HAND_SIZE:
        if config.calc_hairi:
            result.hairi = hairi(closed_34, use_chiitoitsu, use_kokushi)
        return result

    meld_blocks = [m.as_block() for m in hand.melds]
    for decomposition in find_all_decompositions(closed_34):
        if not use_chiitoitsu and len(decomposition) == 7:
            continue
        if not use_kokushi and len(decomposition) == 1 and len(decomposition[0]) == 14:
            continue
        result.decompositions.append(decomposition + meld_blocks)
    logger.debug(f"{len(result.decompositions)} decomposition(s)")
    return result
