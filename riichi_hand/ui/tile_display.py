"""Tile display formatting with colors for terminal output."""

from rich.text import Text

from riichi_hand.core.tile import TileSuit, TILE_NAMES_34, suit_of


# Color schemes
SUIT_COLORS = {
    TileSuit.MAN: "red",
    TileSuit.PIN: "blue",
    TileSuit.SOU: "green",
    TileSuit.HONOR: "yellow",
}


def kind_to_rich_text(kind: int, highlight: bool = False) -> Text:
    """Convert a tile kind to a Rich Text object with its suit color."""
    style = f"bold {SUIT_COLORS[suit_of(kind)]}"
    if highlight:
        style += " on white"
    return Text(f"[{TILE_NAMES_34[kind]}]", style=style)


def kinds_to_rich_text(kinds: list, separator: str = " ") -> Text:
    """Convert a list of kinds to Rich Text."""
    result = Text()
    for i, kind in enumerate(kinds):
        if i > 0:
            result.append(separator)
        result.append_text(kind_to_rich_text(kind))
    return result


def block_to_rich_text(block: list) -> Text:
    """A decomposition block, tiles run together, e.g. [1m][2m][3m]."""
    return kinds_to_rich_text(block, separator="")


def decomposition_to_rich_text(decomposition: list) -> Text:
    """Blocks separated by spaces, sorted so the head and melds read naturally."""
    result = Text()
    for i, block in enumerate(sorted(decomposition, key=lambda b: (len(b) == 2, b))):
        if i > 0:
            result.append("  ")
        result.append_text(block_to_rich_text(block))
    return result
