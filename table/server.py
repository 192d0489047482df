from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Dict, Union

import websockets
from websockets.asyncio.server import ServerConnection, serve

from threeshot.game import InvalidWagerError, PhaseError, ThreeShotTable
from threeshot.models import Decision, TableConfig

LOGGER = logging.getLogger("threeshot_table")

# The table server only translates JSON messages into ThreeShotTable calls.
# Each connection gets its own table; nothing is shared between sessions.


class TableServerError(Exception):
    def __init__(self, code: str, msg: str, **extra: Any) -> None:
        super().__init__(msg)
        self.code = code
        self.msg = msg
        self.extra = extra


@dataclass
class PlayerClient:
    name: str
    websocket: ServerConnection

    async def send_json(self, payload: Dict[str, Any]) -> None:
        await self.websocket.send(json.dumps({"v": 1, **payload}))

    async def send_error(self, code: str, msg: str, **extra: Any) -> None:
        await self.send_json({"type": "error", "code": code, "msg": msg, **extra})


class TableSession:
    """One player, one ThreeShotTable, for the lifetime of a connection."""

    def __init__(self, config: TableConfig, client: PlayerClient) -> None:
        self.table = ThreeShotTable(config)
        self.client = client

    async def run(self) -> None:
        await self.client.send_json({"type": "welcome", "player": self.client.name, **self.table.state_payload()})
        try:
            async for raw in self.client.websocket:
                await self.handle_raw(raw)
        except websockets.ConnectionClosed:
            LOGGER.info("Player %s disconnected", self.client.name)

    async def handle_raw(self, raw: Union[str, bytes]) -> None:
        try:
            message = json.loads(raw)
        except ValueError:  # bad JSON or a binary frame that is not UTF-8
            await self.client.send_error("BAD_JSON", "Message is not valid JSON")
            return
        if not isinstance(message, dict):
            await self.client.send_error("BAD_MESSAGE", "Message must be a JSON object")
            return
        await self.handle_message(message)

    async def handle_message(self, message: Dict[str, Any]) -> None:
        msg_type = message.get("type")
        try:
            if msg_type == "bet":
                await self._handle_bet(message)
            elif msg_type == "decision":
                await self._handle_decision(message)
            elif msg_type == "state":
                await self.client.send_json({"type": "state", **self.table.state_payload()})
            else:
                raise TableServerError("BAD_MESSAGE", f"Unknown message type: {msg_type}")
        except TableServerError as exc:
            await self.client.send_error(exc.code, exc.msg, **exc.extra)

    async def _handle_bet(self, message: Dict[str, Any]) -> None:
        seed = message.get("seed")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise TableServerError("BAD_MESSAGE", "seed must be an integer")
        try:
            ctx = self.table.start_round(
                message.get("first_shot_bet"),
                message.get("five_shot_bet", 0),
                seed=seed,
            )
        except InvalidWagerError as exc:
            raise TableServerError("BAD_WAGER", exc.msg, field=exc.field) from exc
        except PhaseError as exc:
            raise TableServerError("OUT_OF_PHASE", str(exc)) from exc

        LOGGER.info("Dealt %s for %s (seed=%s)", ctx.round_id, self.client.name, ctx.seed)
        await self.client.send_json({"type": "deal", **self.table.deal_payload()})

    async def _handle_decision(self, message: Dict[str, Any]) -> None:
        raw_decision = message.get("decision")
        try:
            decision = Decision(raw_decision)
        except ValueError:
            raise TableServerError("BAD_DECISION", "decision must be 'raise' or 'fold'") from None
        try:
            result = self.table.apply_decision(decision)
        except PhaseError as exc:
            raise TableServerError("OUT_OF_PHASE", str(exc)) from exc

        LOGGER.info(
            "Resolved %s for %s: %s, bet=%s won=%s net=%s",
            self.table.round.round_id if self.table.round else "?",
            self.client.name,
            result.decision.value,
            result.total_bet,
            result.total_winnings,
            result.total_net,
        )
        await self.client.send_json({"type": "result", **self.table.result_payload()})


async def handle_connection(websocket: ServerConnection, config: TableConfig) -> None:
    # First message must be "hello" so we know who we are talking to.
    try:
        raw = await websocket.recv()
    except websockets.ConnectionClosed:
        LOGGER.info("Connection closed before hello")
        return
    try:
        hello = json.loads(raw)
    except ValueError:
        hello = None
    if not isinstance(hello, dict) or hello.get("type") != "hello":
        await websocket.send(json.dumps({"v": 1, "type": "error", "code": "BAD_HELLO", "msg": "Expected hello"}))
        await websocket.close()
        return

    player_raw = hello.get("player")
    player = player_raw.strip() if isinstance(player_raw, str) else ""
    client = PlayerClient(name=player or "PLAYER", websocket=websocket)
    session = TableSession(config, client)
    try:
        await session.run()
    except Exception as exc:  # noqa: BLE001
        LOGGER.exception("Table session crashed for %s: %s", client.name, exc)


def _process_request(connection: ServerConnection, request):
    """Answer plain HTTP health checks; let WebSocket upgrades through."""

    if request.headers.get("Upgrade", "").lower() == "websocket":
        return None
    if request.path in {"/", "/health", "/healthz"}:
        return connection.respond(HTTPStatus.OK, "table server running\n")
    return None


async def run_server(host: str, port: int, config: TableConfig) -> None:
    async def _handler(ws: ServerConnection) -> None:
        await handle_connection(ws, config)

    async with serve(_handler, host, port, process_request=_process_request):
        LOGGER.info("Table server listening on %s:%s (paytable=%s)", host, port, config.paytable)
        await asyncio.Future()
