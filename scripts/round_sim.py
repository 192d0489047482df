#!/usr/bin/env python3
"""Play many seeded 3 Shot rounds with the baseline strategy and report totals.

Example:
    python scripts/round_sim.py --rounds 100000 --bet 10 --five-shot 5 --seed 7
"""

from __future__ import annotations

import argparse
import json
import logging

from threeshot.paytables import PAYTABLE_PRESETS, get_game_config
from threeshot.simulate import simulate

LOGGER = logging.getLogger("round_sim")


def main() -> None:
    parser = argparse.ArgumentParser(description="Simulate 3 Shot Poker rounds")
    parser.add_argument("--rounds", type=int, default=10_000)
    parser.add_argument("--bet", type=int, default=10, help="1st Shot bet")
    parser.add_argument("--five-shot", type=int, default=0, help="5 Shot side bet")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--paytable", default="grand_sierra", choices=sorted(PAYTABLE_PRESETS))
    parser.add_argument("--json", action="store_true", help="Print the full summary as JSON")
    args = parser.parse_args()

    config = get_game_config(args.paytable)
    LOGGER.info("Simulating %s rounds on %s (seed=%s)", args.rounds, config.name, args.seed)
    summary = simulate(
        args.rounds,
        args.bet,
        args.five_shot,
        seed=args.seed,
        config=config,
    )

    if args.json:
        print(json.dumps(summary.as_dict(), indent=2))
        return

    LOGGER.info("Raised %s / folded %s", summary.raises, summary.folds)
    LOGGER.info(
        "Total bet %s, winnings %s, net %s (%.4f per round)",
        summary.total_bet,
        summary.total_winnings,
        summary.total_net,
        summary.average_net,
    )
    for rank, count in summary.shot_hits.most_common():
        LOGGER.info("  shot %-18s %s", rank.label, count)
    for rank, count in summary.five_shot_hits.most_common():
        LOGGER.info("  5 shot %-16s %s", rank.label, count)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
