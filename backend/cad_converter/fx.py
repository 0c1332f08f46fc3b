"""FX conversion helpers."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from .models import ConversionRequest, ConversionResult, RateObservation

AMOUNT_PRECISION = Decimal("0.0001")


def quantize_amount(value: str | int | Decimal) -> Decimal:
    """Return ``value`` as a Decimal with four fractional digits.

    Amounts that do not fit the default 28-digit context are rejected.
    """

    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValueError(f"Invalid amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    try:
        return amount.quantize(AMOUNT_PRECISION, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(f"Invalid amount: {value!r} has too many digits") from exc


def convert(request: ConversionRequest, observation: RateObservation) -> ConversionResult:
    """Apply ``observation`` to the request amount."""

    amount_digits = len(request.amount.as_tuple().digits)
    rate_digits = len(observation.rate.as_tuple().digits)
    with localcontext() as ctx:
        # Exact product, then enough room to hold it at four fractional digits.
        ctx.prec = max(ctx.prec, amount_digits + rate_digits)
        product = request.amount * observation.rate
        ctx.prec = max(ctx.prec, product.adjusted() + 1 + 4)
        converted = product.quantize(AMOUNT_PRECISION, rounding=ROUND_HALF_UP)
    return ConversionResult(request=request, observation=observation, converted=converted)


__all__ = ["AMOUNT_PRECISION", "convert", "quantize_amount"]
