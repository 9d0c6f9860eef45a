"""Locale-aware value formatters.

Thin wrappers around Babel's CLDR formatting for numbers, currencies, dates
and lists. Formatters never raise: bad input is logged and returned as
str(value) so a translation always renders.
"""

import re
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from functools import lru_cache
from typing import Any, Iterable, Optional, Union

from babel import Locale as BabelLocale
from babel import UnknownLocaleError
from babel.dates import format_date as babel_format_date
from babel.lists import format_list as babel_format_list
from babel.numbers import (
    format_compact_decimal,
    format_currency as babel_format_currency,
    format_decimal,
    format_percent,
)

from locale_engine.core.logging import get_module_logger

logger = get_module_logger()

FALLBACK_FORMAT_LOCALE = "en"
DEFAULT_CURRENCY = "USD"
CURRENCY_CODE_PATTERN = re.compile(r"^[A-Z]{3}$")

NUMBER_STYLES = frozenset({"decimal", "percent", "integer", "compact"})
DATE_STYLES = frozenset({"short", "medium", "long", "full"})
LIST_STYLES = {
    "conjunction": "standard",
    "and": "standard",
    "disjunction": "or",
    "or": "or",
    "unit": "unit",
}


class FormatKind(str, Enum):
    """Format kinds usable in {{ name, kind, arg }} placeholders."""

    NUMBER = "number"
    CURRENCY = "currency"
    DATE = "date"
    LIST = "list"

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional["FormatKind"]:
        """Return the FormatKind for a placeholder token, or None if unknown."""
        if not name:
            return None
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


@lru_cache(maxsize=50)
def _parse_babel_locale(locale: str) -> BabelLocale:
    return BabelLocale.parse(locale.strip().replace("-", "_"))


def get_babel_locale(locale: str) -> BabelLocale:
    """Parse a locale code for Babel, falling back to English.

    Successful parses are cached; failures are logged on every call.
    """
    try:
        return _parse_babel_locale(locale or "")
    except (UnknownLocaleError, ValueError, TypeError):
        logger.warning(
            "invalid_format_locale",
            locale=locale,
            fallback_locale=FALLBACK_FORMAT_LOCALE,
        )
        return _parse_babel_locale(FALLBACK_FORMAT_LOCALE)


def _to_number(value: Any) -> Optional[Union[int, float, Decimal]]:
    """Coerce a parameter value to a number, or None if it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        return value
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            return None
    return None


def format_number(value: Any, locale: str, style: str = "decimal") -> str:
    """Format a number with locale-aware grouping and decimal separators.

    Args:
        value: Number (or numeric string) to format.
        locale: Locale code.
        style: One of "decimal", "percent", "integer", "compact".

    Returns:
        Formatted number, or str(value) if value is not numeric.
    """
    number = _to_number(value)
    if number is None:
        logger.warning("invalid_number_value", value=str(value), locale=locale)
        return str(value)

    babel_locale = get_babel_locale(locale)
    style = (style or "decimal").strip().lower()
    if style not in NUMBER_STYLES:
        logger.warning("unknown_number_style", style=style)
        style = "decimal"

    if style == "percent":
        return format_percent(number, locale=babel_locale)
    if style == "integer":
        return format_decimal(number, format="#,##0", locale=babel_locale)
    if style == "compact":
        return format_compact_decimal(number, locale=babel_locale)
    return format_decimal(number, locale=babel_locale)


def format_currency(value: Any, locale: str, currency: Optional[str] = None) -> str:
    """Format a monetary amount.

    Args:
        value: Amount to format.
        locale: Locale code.
        currency: ISO 4217 code, defaults to USD. Codes that are not three
            letters are logged and replaced by USD.

    Returns:
        Formatted amount, or str(value) if value is not numeric.
    """
    number = _to_number(value)
    if number is None:
        logger.warning("invalid_number_value", value=str(value), locale=locale)
        return str(value)

    code = (currency or DEFAULT_CURRENCY).strip().upper()
    if not CURRENCY_CODE_PATTERN.match(code):
        logger.warning(
            "invalid_currency_code",
            currency=currency,
            fallback_currency=DEFAULT_CURRENCY,
        )
        code = DEFAULT_CURRENCY
    return babel_format_currency(number, code, locale=get_babel_locale(locale))


def _to_date(value: Any) -> Optional[date]:
    """Coerce a date instant, epoch seconds or ISO 8601 string to a date."""
    if isinstance(value, (datetime, date)):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    return None


def format_date(value: Any, locale: str, style: str = "medium") -> str:
    """Format a date.

    Numbers are read as POSIX timestamps in seconds (UTC). Unparseable values
    are logged and returned unchanged as a string.

    Args:
        value: datetime, date, timestamp or ISO 8601 string.
        locale: Locale code.
        style: "short", "medium", "long" or "full".

    Returns:
        Formatted date string.
    """
    parsed = _to_date(value)
    if parsed is None:
        logger.warning("invalid_date_value", value=str(value), locale=locale)
        return str(value)

    style = (style or "medium").strip().lower()
    if style not in DATE_STYLES:
        logger.warning("unknown_date_style", style=style)
        style = "medium"
    return babel_format_date(parsed, format=style, locale=get_babel_locale(locale))


def format_list(items: Iterable[Any], locale: str, style: str = "conjunction") -> str:
    """Join items with locale-aware connectors ("a, b, and c").

    Args:
        items: Items to join; each is converted with str().
        locale: Locale code.
        style: "conjunction" (and), "disjunction" (or) or "unit".

    Returns:
        Joined string; "" for no items, the item itself for a single item.
    """
    if isinstance(items, (str, bytes)):
        items = [items]
    values = [str(item) for item in items]
    if not values:
        return ""
    if len(values) == 1:
        return values[0]

    babel_style = LIST_STYLES.get((style or "conjunction").strip().lower())
    if babel_style is None:
        logger.warning("unknown_list_style", style=style)
        babel_style = "standard"
    try:
        return babel_format_list(values, style=babel_style, locale=get_babel_locale(locale))
    except ValueError:
        # Older CLDR data may lack the requested style for a locale.
        return ", ".join(values)


def format_value(
    value: Any,
    kind: Union[FormatKind, str, None],
    format_arg: Optional[str],
    locale: str,
) -> str:
    """Format a value for a {{ name, kind, arg }} placeholder.

    Args:
        value: Resolved parameter value.
        kind: FormatKind (or its name); unknown kinds substitute str(value).
        format_arg: Optional style/currency argument.
        locale: Locale code.

    Returns:
        Formatted string.
    """
    if not isinstance(kind, FormatKind):
        kind = FormatKind.from_name(kind)
    if kind is None:
        return str(value)

    if kind is FormatKind.NUMBER:
        return format_number(value, locale, format_arg or "decimal")
    if kind is FormatKind.CURRENCY:
        return format_currency(value, locale, format_arg or DEFAULT_CURRENCY)
    if kind is FormatKind.DATE:
        return format_date(value, locale, format_arg or "medium")
    if kind is FormatKind.LIST:
        if not isinstance(value, Iterable):
            value = [value]
        return format_list(value, locale, format_arg or "conjunction")
    raise AssertionError(f"Unhandled format kind: {kind}")
