import argparse
import asyncio
import logging

from threeshot.models import TableConfig
from threeshot.paytables import PAYTABLE_PRESETS

from .server import run_server

logging.basicConfig(level=logging.INFO)


def main() -> None:
    parser = argparse.ArgumentParser(description="3 Shot Poker table server")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8765)
    parser.add_argument("--paytable", default="grand_sierra", choices=sorted(PAYTABLE_PRESETS))
    parser.add_argument("--min-bet", type=int, default=1)
    parser.add_argument("--max-bet", type=int, default=None, help="Upper limit on the 1st Shot bet")
    parser.add_argument("--seed", type=int, default=None, help="Fixed shuffle seed for every round (replay/testing)")
    args = parser.parse_args()

    config = TableConfig(
        paytable=args.paytable,
        min_bet=args.min_bet,
        max_bet=args.max_bet,
        seed=args.seed,
    )
    asyncio.run(run_server(args.host, args.port, config))


if __name__ == "__main__":
    main()
