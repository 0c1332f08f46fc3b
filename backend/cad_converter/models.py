"""Domain models for a single currency conversion."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class ConversionRequest:
    """What the caller asked to convert."""

    amount: Decimal
    source: str
    target: str
    exchange_date: date


@dataclass(frozen=True)
class RateObservation:
    """A dated rate for one ordered currency pair."""

    date: date
    rate: Decimal


@dataclass(frozen=True)
class ConversionResult:
    """A request together with the observation used to price it."""

    request: ConversionRequest
    observation: RateObservation
    converted: Decimal

    @property
    def exchange_date(self) -> date:
        """Return the effective date, which may precede the requested one."""

        return self.observation.date

    @property
    def exchange_rate(self) -> Decimal:
        return self.observation.rate
