"""Command line: least mana needed to beat the boss described in a file.

Usage:
    mana-duel input.txt
    mana-duel input.txt --difficulty hard --show-path -v
"""

from __future__ import annotations
import argparse
import logging
import sys

from manaduel.boss_stats import read_boss
from manaduel.errors import BossStatsError
from manaduel.games.wizard_duel import WizardDuel

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNSOLVABLE = 1
EXIT_INPUT_ERROR = 2


def non_negative_int(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def build_parser():
    parser = argparse.ArgumentParser(
        prog="mana-duel",
        description="Find the least mana a caster must spend to defeat the boss.",
    )
    parser.add_argument("input", help="File with 'Hit Points: N' and 'Damage: N' lines")
    parser.add_argument("--difficulty", choices=["normal", "hard", "both"], default="both",
                        help="Which preset(s) to solve (default: both)")
    parser.add_argument("--hit-points", type=non_negative_int, default=None, help="Caster starting hit points")
    parser.add_argument("--mana", type=non_negative_int, default=None, help="Caster starting mana")
    parser.add_argument("--max-cost", type=non_negative_int, default=None, help="Give up on paths costing more than this")
    parser.add_argument("--show-path", action="store_true", help="Print one cheapest move sequence")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v for INFO, -vv for DEBUG")
    return parser


def _configure_logging(verbosity):
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")


def main(argv=None):
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        boss = read_boss(args.input)
    except (OSError, BossStatsError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    names = ["normal", "hard"] if args.difficulty == "both" else [args.difficulty]
    status = EXIT_OK
    for name in names:
        overrides = {}
        if args.hit_points is not None:
            overrides["caster_hit_points"] = args.hit_points
        if args.mana is not None:
            overrides["caster_mana"] = args.mana
        config = WizardDuel.preset(name, **overrides)
        logger.info("solving %s: %s", name, config)
        result = WizardDuel.solve(boss, config, max_cost=args.max_cost)

        if not result.solved:
            print(f"{name}: unsolvable")
            status = EXIT_UNSOLVABLE
            continue
        print(f"{name}: {result.cost}")
        if args.show_path:
            print("  " + " -> ".join(move.name for move in result.path))

    return status


if __name__ == "__main__":
    sys.exit(main())
