"""Placeholder interpolation for translated templates.

Supported placeholder forms (whitespace inside the braces is ignored):

    {{name}}                  raw value
    {{user.name}}             dotted lookup into nested params
    {{total, currency, EUR}}  value passed through a formatter
"""

import re
from datetime import date
from typing import List, Optional

from locale_engine.core.logging import get_module_logger
from locale_engine.i18n.formatters import format_date, format_value
from locale_engine.i18n.lookup import resolve_path
from locale_engine.i18n.models import ParameterMap

logger = get_module_logger()

PLACEHOLDER_PATTERN = re.compile(
    r"\{\{\s*([\w.-]+)\s*(?:,\s*(\w+)\s*(?:,\s*([\w.-]+)\s*)?)?\}\}"
)


def find_placeholders(template: str) -> List[str]:
    """Return placeholder names in order of first appearance."""
    names: List[str] = []
    for match in PLACEHOLDER_PATTERN.finditer(template):
        if match.group(1) not in names:
            names.append(match.group(1))
    return names


def interpolate(
    template: str,
    params: Optional[ParameterMap],
    locale: str,
    key: Optional[str] = None,
) -> str:
    """Substitute parameters into a template.

    Missing parameters are left in the output verbatim so the gap stays
    visible, and a warning names the key and the parameter.

    Args:
        template: Translated template string.
        params: Parameter map, or None if the caller passed none.
        locale: Locale used by formatters.
        key: Translation key, for log context.

    Returns:
        Interpolated string.
    """
    if params is None:
        placeholders = find_placeholders(template)
        if placeholders:
            logger.warning(
                "missing_interpolation_params",
                key=key,
                placeholders=placeholders,
            )
        return template

    def replace(match: "re.Match[str]") -> str:
        name, kind, format_arg = match.group(1), match.group(2), match.group(3)
        value = resolve_path(params, name)
        if value is None:
            logger.warning(
                "missing_interpolation_param",
                key=key,
                param=name,
                provided_params=list(params.keys()),
            )
            return match.group(0)
        if kind:
            return format_value(value, kind, format_arg, locale)
        # Dates render through the date formatter, not str().
        if isinstance(value, date):
            return format_date(value, locale)
        return str(value)

    return PLACEHOLDER_PATTERN.sub(replace, template)
