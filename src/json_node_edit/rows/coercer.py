"""ValueCoercer: converts user-entered text back into a typed scalar.

Coercion is driven by the declared kind of the row being edited, never by
the text. Unparsable number or boolean text degrades to the text itself, so a
single malformed field can never fail a save.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, assert_never

from json_node_edit.rows.nodes import ValueKind

__all__ = ["ValueCoercer", "parse_number"]

logger = logging.getLogger(__name__)

# Decimal literal with optional fraction and exponent. No digit separators.
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INTEGER = re.compile(r"[+-]?[0-9]+")
# Prefixed integer literals; sign is not allowed in front of a prefix.
_PREFIXED = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")


def parse_number(text: str) -> int | float | None:
    """Parse ``text`` as a finite numeric literal.

    Surrounding whitespace is ignored and blank text is ``0``. Integer
    literals produce ``int``; decimals and exponents produce ``float``.

    Returns:
        The number, or ``None`` when ``text`` is not a finite numeric literal.
    """
    stripped = text.strip()
    if not stripped:
        return 0
    try:
        if _PREFIXED.fullmatch(stripped):
            return int(stripped, 0)
        if _INTEGER.fullmatch(stripped):
            return int(stripped)
    except ValueError:
        # Past the interpreter's integer string conversion limit.
        return None
    if _DECIMAL.fullmatch(stripped):
        number = float(stripped)
        return number if math.isfinite(number) else None
    return None


class ValueCoercer:
    """Turns edited text into a scalar of the row's declared kind.

    Example::

        coercer = ValueCoercer()
        coercer.coerce(ValueKind.NUMBER, "42")      # 42
        coercer.coerce(ValueKind.NUMBER, "abc")     # "abc"
        coercer.coerce(ValueKind.BOOLEAN, "TRUE")   # True
        coercer.coerce(ValueKind.NULL, "anything")  # None
    """

    def coerce(self, declared_type: ValueKind | str, text: str) -> Any:
        """Coerce ``text`` according to ``declared_type``.

        Unknown type tags behave like ``string``. Never raises.
        """
        try:
            kind = ValueKind(declared_type)
        except ValueError:
            return text

        match kind:
            case ValueKind.NUMBER:
                number = parse_number(text)
                if number is None:
                    logger.debug("Number text %r kept as string", text)
                    return text
                return number
            case ValueKind.BOOLEAN:
                lowered = text.lower()
                if lowered == "true":
                    return True
                if lowered == "false":
                    return False
                logger.debug("Boolean text %r kept as string", text)
                return text
            case ValueKind.NULL:
                return None
            case ValueKind.STRING | ValueKind.OBJECT | ValueKind.ARRAY:
                return text
            case _:
                assert_never(kind)
