"""WebSocket host for a single-player 3 Shot table."""

from .server import TableServerError, TableSession, handle_connection, run_server

__all__ = ["TableServerError", "TableSession", "handle_connection", "run_server"]
