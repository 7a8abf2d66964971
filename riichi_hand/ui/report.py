"""Analysis report rendering using Rich, plus the JSON export."""

import json

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from riichi_hand.core.tile import histogram_to_kinds
from riichi_hand.rules.analysis import HandAnalysis
from riichi_hand.rules.hairi import ukeire
from riichi_hand.ui.tile_display import (
    block_to_rich_text, decomposition_to_rich_text, kind_to_rich_text,
    kinds_to_rich_text,
)

AGARI_TYPE_LABELS = {
    'standard': "standard (4 mentsu + 1 jantai)",
    'chiitoi': "七対子 (seven pairs)",
    'kokushi': "国士無双 (thirteen orphans)",
}


def shanten_label(value: int) -> str:
    if value == -1:
        return "和了 (complete)"
    if value == 0:
        return "聴牌 (tenpai)"
    return f"{value} 向聴"


def render_analysis(console: Console, analysis: HandAnalysis):
    """Render the full analysis of one hand."""
    header = Text()
    header.append("  Hand: ")
    header.append_text(kinds_to_rich_text(histogram_to_kinds(analysis.closed_34)))
    for meld in analysis.melds:
        header.append("  ")
        header.append_text(block_to_rich_text(list(meld.kinds)))
        header.append(f" ({meld.meld_type.value})", style="dim")
    header.append(f"\n  Shanten: {shanten_label(analysis.shanten)}")
    if analysis.is_agari:
        header.append(f"\n  Win: {AGARI_TYPE_LABELS[analysis.agari_type]}", style="bold green")

    console.print(Panel(header, title="[bold]Hand analysis[/bold]", border_style="cyan"))

    if analysis.decompositions:
        _render_decompositions(console, analysis)
    if analysis.hairi is not None:
        _render_hairi(console, analysis)


def _render_decompositions(console: Console, analysis: HandAnalysis):
    table = Table(title="Decompositions", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Blocks")
    for i, decomposition in enumerate(analysis.decompositions, 1):
        table.add_row(str(i), decomposition_to_rich_text(decomposition))
    console.print(table)


def _render_hairi(console: Console, analysis: HandAnalysis):
    report = analysis.hairi
    if not report.waits_after_discard:
        line = Text("  Useful tiles: ")
        line.append_text(kinds_to_rich_text(report.wait))
        line.append(f"  ({ukeire(analysis.visible_34, report.wait)} tiles)", style="dim")
        console.print(line)
        return

    table = Table(title="Discards keeping the shanten")
    table.add_column("Discard")
    table.add_column("Useful tiles")
    table.add_column("Count", justify="right")
    waits = dict(report.waits_after_discard)
    for discard, count in report.best_discards(analysis.visible_34):
        table.add_row(
            kind_to_rich_text(discard, highlight=True),
            kinds_to_rich_text(waits[discard]),
            str(count),
        )
    console.print(table)


def save_analysis(analysis: HandAnalysis, filepath: str) -> str:
    """Write the analysis to a JSON file."""
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(analysis.to_dict(), f, ensure_ascii=False, indent=2)
    return filepath


def analysis_to_json(analysis: HandAnalysis) -> str:
    return json.dumps(analysis.to_dict(), ensure_ascii=False, indent=2)
