"""Bank of Canada Valet client used to price conversions."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

import httpx

from ..config import get_settings
from ..currencies import series_name
from ..models import RateObservation

logger = logging.getLogger(__name__)


class ValetError(RuntimeError):
    """Raised when Valet returns a payload without a usable observation."""


def lookback_window(exchange_date: date, days: int) -> tuple[date, date]:
    """Return the inclusive ``(start, end)`` window ending at ``exchange_date``."""

    return exchange_date - timedelta(days=days), exchange_date


def _parse_observation(observation: Mapping[str, Any], series: str) -> RateObservation:
    # The rate lives under a key named after the series, e.g. "FXUSDCAD".
    try:
        raw_date = observation["d"]
        raw_rate = observation[series]["v"]
    except (KeyError, TypeError) as exc:
        raise ValetError(f"Valet observation is missing {series!r} data: {observation!r}") from exc
    try:
        return RateObservation(date=date.fromisoformat(raw_date), rate=Decimal(raw_rate))
    except (ValueError, TypeError, InvalidOperation) as exc:
        raise ValetError(f"Valet observation could not be parsed: {observation!r}") from exc


class ValetClient:
    """Look up the most recent FX observation for an ordered currency pair."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        lookback_days: int | None = None,
        timeout_seconds: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        settings = get_settings()
        self.base_url = (base_url or settings.valet_base_url).rstrip("/")
        self.lookback_days = settings.lookback_days if lookback_days is None else lookback_days
        self.timeout_seconds = timeout_seconds or settings.valet_timeout_seconds
        self._client = client

    async def fetch_observations(
        self, source: str, target: str, start: date, end: date
    ) -> list[dict[str, Any]]:
        """Return the raw observations for the pair, newest first."""

        url = f"{self.base_url}/observations/{series_name(source, target)}"
        params = {
            "start_date": start.isoformat(),
            "end_date": end.isoformat(),
            "order_dir": "desc",
        }
        logger.info("Requesting %s between %s and %s", series_name(source, target), start, end)
        if self._client is not None:
            response = await self._client.get(url, params=params)
        else:
            async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
                response = await client.get(url, params=params)
        response.raise_for_status()
        payload = response.json()
        observations = payload.get("observations") if isinstance(payload, dict) else None
        if not isinstance(observations, list):
            raise ValetError("Valet response has no observations list")
        return observations

    async def latest_observation(self, source: str, target: str, exchange_date: date) -> RateObservation:
        """Return the newest observation at or before ``exchange_date`` in the window."""

        start, end = lookback_window(exchange_date, self.lookback_days)
        series = series_name(source, target)
        observations = await self.fetch_observations(source, target, start, end)
        if not observations:
            raise ValetError(f"No {series} observations between {start} and {end}")
        observation = _parse_observation(observations[0], series)
        if observation.date != exchange_date:
            logger.info("No %s rate on %s; using %s", series, exchange_date, observation.date)
        return observation


__all__ = ["ValetClient", "ValetError", "lookback_window"]
