"""JSON output schema for conversion results."""

from __future__ import annotations

import json
from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from .models import ConversionResult


class ConversionResultSchema(BaseModel):
    source_amount: Decimal = Field(..., alias="sourceCurrencyValue")
    source_currency: str = Field(..., alias="sourceCurrencyISOCode", examples=["CAD"])
    target_currency: str = Field(..., alias="targetCurrencyISOCode", examples=["USD"])
    exchange_date: date = Field(..., alias="exchangeDate")
    exchange_rate: Decimal = Field(..., alias="exchangeRate")
    converted_amount: Decimal = Field(..., alias="exchangeResult")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_result(cls, result: ConversionResult) -> "ConversionResultSchema":
        return cls(
            source_amount=result.request.amount,
            source_currency=result.request.source,
            target_currency=result.request.target,
            exchange_date=result.exchange_date,
            exchange_rate=result.exchange_rate,
            converted_amount=result.converted,
        )


def render_result(result: ConversionResult) -> str:
    """Return the result as 4-space indented JSON.

    Decimals are written as their exact digit strings and the date as
    ``YYYY-MM-DD``.
    """

    payload = ConversionResultSchema.from_result(result).model_dump(by_alias=True)
    return json.dumps(payload, indent=4, default=str)


__all__ = ["ConversionResultSchema", "render_result"]
