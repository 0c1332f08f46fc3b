"""Supported currency codes and pair validation."""

from __future__ import annotations

SUPPORTED_CURRENCIES: tuple[str, ...] = (
    "CAD",
    "USD",
    "EUR",
    "JPY",
    "GBP",
    "AUD",
    "CHF",
    "CNY",
    "HKD",
    "MXN",
    "INR",
)
REQUIRED_CURRENCY = "CAD"


class UnsupportedPairError(ValueError):
    """Raised when a currency pair cannot be converted."""


def supported_codes_text() -> str:
    return ",".join(SUPPORTED_CURRENCIES)


def normalize_code(code: str) -> str:
    """Return the upper-cased ISO code for consistent comparisons."""

    return code.strip().upper()


def validate_pair(source: str, target: str) -> None:
    """Reject pairs without a CAD leg or with codes outside the allow-list."""

    if REQUIRED_CURRENCY not in (source, target):
        raise UnsupportedPairError(
            f"Neither of the provided currency codes are {REQUIRED_CURRENCY}. "
            f"Only conversions involving {REQUIRED_CURRENCY} are supported"
        )
    if source not in SUPPORTED_CURRENCIES or target not in SUPPORTED_CURRENCIES:
        raise UnsupportedPairError(
            "One or more provided currency codes are not supported. "
            f"Supported codes: {supported_codes_text()}"
        )


def pair_key(source: str, target: str) -> str:
    # Valet indexes series by ordered pair; USDCAD and CADUSD differ.
    return f"{source}{target}"


def series_name(source: str, target: str) -> str:
    return f"FX{pair_key(source, target)}"


__all__ = [
    "REQUIRED_CURRENCY",
    "SUPPORTED_CURRENCIES",
    "UnsupportedPairError",
    "normalize_code",
    "pair_key",
    "series_name",
    "supported_codes_text",
    "validate_pair",
]
