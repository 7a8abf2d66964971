"""Meld (副露) data structures for Chi/Pon/Kan."""

from dataclasses import dataclass
from enum import Enum
from typing import List


class MeldType(Enum):
    CHI = "chi"            # 吃
    PON = "pon"            # 碰
    ANKAN = "ankan"        # 暗杠
    MINKAN = "minkan"      # 明杠 (daiminkan or shouminkan)


@dataclass(frozen=True)
class Meld:
    """A frozen meld (副露) data structure.

    Attributes:
        meld_type: Type of meld
        kinds: Kinds of all tiles in the meld, sorted
    """
    meld_type: MeldType
    kinds: tuple

    @classmethod
    def from_kinds(cls, kinds) -> 'Meld':
        """Build a meld from its kinds, inferring the type from the shape.

        Four identical kinds are read as a closed kan; use the constructor
        for an open one.
        """
        kinds = tuple(sorted(kinds))
        if len(kinds) == 4 and len(set(kinds)) == 1:
            return cls(MeldType.ANKAN, kinds)
        if len(kinds) == 3 and len(set(kinds)) == 1:
            return cls(MeldType.PON, kinds)
        return cls(MeldType.CHI, kinds)

    @property
    def is_open(self) -> bool:
        return self.meld_type != MeldType.ANKAN

    @property
    def is_kan(self) -> bool:
        return self.meld_type in (MeldType.ANKAN, MeldType.MINKAN)

    def as_block(self) -> List[int]:
        """The meld as a decomposition block; a kan takes one mentsu slot."""
        return list(self.kinds[:3])
