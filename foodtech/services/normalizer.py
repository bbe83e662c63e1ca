"""Ingredient grouping keys and amount parsing for shopping-list aggregation."""

import logging
import math
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# NUL never appears in a typed ingredient name or unit
KEY_SEPARATOR = "\x00"

# Leading decimal literal: optional sign, digits with optional fraction, optional exponent
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def normalize_key(name: str, unit: str) -> str:
    """Build the grouping key for an ingredient line or inventory item.

    Name and unit are compared case-insensitively and kept apart, so
    ``("Flour", "cups")`` and ``("flour", "CUPS")`` share a key while
    ``("Flour", "g")`` does not.
    """
    return f"{(name or '').lower()}{KEY_SEPARATOR}{(unit or '').lower()}"


@dataclass(frozen=True)
class ParsedAmount:
    """Result of parsing a free-text amount: a value or a failure reason."""

    value: float | None = None
    error: str | None = None

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, value: float) -> "ParsedAmount":
        return cls(value=value)

    @classmethod
    def failed(cls, reason: str) -> "ParsedAmount":
        return cls(error=reason)


def parse_amount(text: str | None) -> ParsedAmount:
    """Parse an order line's amount.

    Reads the decimal number at the start of the text, such as ``"2"``,
    ``"0.5"``, ``"1e3"`` or the ``250`` in ``"250g"``. Anything after the
    number is ignored. Text that does not start with a number, and values
    that overflow, are failures. Negative values are returned as-is.
    """
    if text is None:
        return ParsedAmount.failed("amount is missing")
    if not isinstance(text, str):
        # JSON payloads occasionally carry a bare number
        if isinstance(text, bool) or not isinstance(text, (int, float)):
            return ParsedAmount.failed(f"unsupported amount type {type(text).__name__}")
        text = str(text)

    stripped = text.strip()
    if not stripped:
        return ParsedAmount.failed("amount is empty")
    match = _DECIMAL_RE.match(stripped)
    if match is None:
        return ParsedAmount.failed(f"not a decimal number: {text!r}")

    value = float(match.group())
    if not math.isfinite(value):
        return ParsedAmount.failed(f"amount out of range: {text!r}")

    trailing = stripped[match.end():].strip()
    if trailing:
        logger.info(f"Ignoring '{trailing}' after amount {match.group()} in {text!r}")
    return ParsedAmount.ok(value)
