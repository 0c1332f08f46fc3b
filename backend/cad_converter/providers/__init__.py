"""Rate providers."""

from .valet import ValetClient, ValetError, lookback_window

__all__ = ["ValetClient", "ValetError", "lookback_window"]
