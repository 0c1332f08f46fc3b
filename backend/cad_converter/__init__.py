"""Convert amounts to and from CAD using Bank of Canada Valet rates."""

from .fx import convert, quantize_amount
from .models import ConversionRequest, ConversionResult, RateObservation

__all__ = [
    "ConversionRequest",
    "ConversionResult",
    "RateObservation",
    "convert",
    "quantize_amount",
]
