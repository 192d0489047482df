#!/usr/bin/env python3
"""Terminal client for the 3 Shot table server.

Example:
    python scripts/table_client.py --url ws://localhost:8765 --player alice
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from typing import Any, Dict

import websockets

logging.basicConfig(level=logging.INFO)
LOGGER = logging.getLogger("table_client")


def _format_wager(name: str, entry: Dict[str, Any]) -> str:
    return (
        f"{name:<8} {' '.join(entry['hand']):<16} {entry['label']:<20} "
        f"wager={entry['wager']:<5} x{entry['payout_multiplier']:<4} won={entry['winnings']}"
    )


class TableClient:
    def __init__(self, player: str, url: str, bet: int, five_shot: int) -> None:
        self.player = player
        self.url = url
        self.bet = bet
        self.five_shot = five_shot

    async def run(self) -> None:
        async with websockets.connect(self.url) as ws:
            await ws.send(json.dumps({"type": "hello", "v": 1, "player": self.player}))
            async for raw in ws:
                msg = json.loads(raw)
                reply = self._handle(msg)
                if reply is None:
                    break
                if reply:
                    await ws.send(json.dumps(reply))

    def _handle(self, msg: Dict[str, Any]):
        msg_type = msg.get("type")
        if msg_type == "welcome":
            print(f"Seated as {msg['player']} ({msg['config']['paytables']['name']})")
            return self._prompt_bet()
        if msg_type == "deal":
            print(f"{msg['round_id']}: hole cards {' '.join(msg['hole'])}")
            choice = ""
            while choice not in {"raise", "fold"}:
                choice = input("raise or fold? ").strip().lower()
            return {"type": "decision", "decision": choice}
        if msg_type == "result":
            print(f"Community: {' '.join(msg['community'])}")
            for idx, shot in enumerate(msg["shots"], start=1):
                print(_format_wager(f"Shot {idx}", shot))
            print(_format_wager("5 Shot", msg["five_shot"]))
            print(f"Bet {msg['total_bet']}  won {msg['total_winnings']}  net {msg['total_net']}")
            return self._prompt_bet()
        if msg_type == "error":
            LOGGER.warning("%s: %s", msg.get("code"), msg.get("msg"))
            if msg.get("code") == "BAD_WAGER":
                return self._prompt_bet()
            # Resync with the table before deciding what to ask for next.
            return {"type": "state"}
        if msg_type == "state":
            round_info = msg.get("round")
            if msg.get("phase") == "DECISION" and round_info:
                return self._handle({"type": "deal", **round_info})
            return self._prompt_bet()
        return {}

    def _prompt_bet(self):
        while True:
            answer = input(f"1st Shot bet [{self.bet}] (q to quit): ").strip().lower()
            if answer == "q":
                return None
            if not answer:
                break
            if answer.isdigit():
                self.bet = int(answer)
                break
            print("Enter a whole number.")
        return {"type": "bet", "first_shot_bet": self.bet, "five_shot_bet": self.five_shot}


def main() -> None:
    parser = argparse.ArgumentParser(description="Play 3 Shot Poker against the table server")
    parser.add_argument("--url", default="ws://localhost:8765")
    parser.add_argument("--player", default="player")
    parser.add_argument("--bet", type=int, default=10)
    parser.add_argument("--five-shot", type=int, default=0)
    args = parser.parse_args()

    try:
        asyncio.run(TableClient(args.player, args.url, args.bet, args.five_shot).run())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
