#!/usr/bin/env python3
"""Riichi Mahjong hand analyzer - win check, decompositions, shanten, useful tiles.

Examples:
    python main.py 123m456p789s東東東南南
    python main.py 123345m678p11s --meld 777z
    python main.py 1199m1199p1199s1z --json -
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console

from riichi_hand.core.hand import Hand
from riichi_hand.core.meld import Meld, MeldType
from riichi_hand.core.tile import histogram_from_string, histogram_to_kinds
from riichi_hand.rules.analysis import AnalysisConfig, analyze_hand
from riichi_hand.ui.report import analysis_to_json, render_analysis, save_analysis

console = Console()
logger = logging.getLogger(__name__)


def parse_meld(text: str, meld_type: Optional[MeldType] = None) -> Meld:
    """Parse a meld written in hand shorthand, e.g. '123m' or '5555p'."""
    kinds = histogram_to_kinds(histogram_from_string(text))
    if meld_type is None:
        return Meld.from_kinds(kinds)
    return Meld(meld_type, tuple(kinds))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Analyze a Riichi Mahjong hand: shanten, waits and decompositions")
    parser.add_argument("hand", help="closed tiles, e.g. 123m456p789s東東東南南")
    parser.add_argument("--meld", action="append", default=[],
                        help="called chi/pon or closed kan (4 identical tiles), repeatable")
    parser.add_argument("--minkan", action="append", default=[],
                        help="open kan, e.g. 5555s, repeatable")
    parser.add_argument("--no-chiitoi", action="store_true",
                        help="ignore the seven pairs form")
    parser.add_argument("--no-kokushi", action="store_true",
                        help="ignore the thirteen orphans form")
    parser.add_argument("--no-hairi", action="store_true",
                        help="skip the useful tile report")
    parser.add_argument("--json", metavar="PATH",
                        help="write the analysis as JSON ('-' for stdout)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="debug logging")
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    config = AnalysisConfig(
        use_chiitoitsu=not args.no_chiitoi,
        use_kokushi=not args.no_kokushi,
        calc_hairi=not args.no_hairi,
    )

    try:
        melds = [parse_meld(m) for m in args.meld]
        melds += [parse_meld(m, MeldType.MINKAN) for m in args.minkan]
        hand = Hand.from_34_array(histogram_from_string(args.hand), melds)
        analysis = analyze_hand(hand, config)
    except ValueError as e:
        console.print(f"  [red]{e}[/red]")
        return 2

    if args.json == "-":
        print(analysis_to_json(analysis))
        return 0

    render_analysis(console, analysis)
    if args.json:
        path = save_analysis(analysis, args.json)
        console.print(f"  [dim]Saved to {path}[/dim]")
        logger.info(f"analysis written to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
