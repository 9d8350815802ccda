"""Encode plan inputs as shareable URL query strings.

Links use the camelCase field names of the web form
(``?currentAge=30&retirementAge=65...``).  Parsing is lenient: unknown keys,
values that are not numbers and ages that are not whole years are dropped,
so a partly broken link still restores whatever it can on top of the
defaults.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Mapping, Optional
from urllib.parse import parse_qsl, urlencode

from .assumptions import DEFAULT_INPUTS
from .inputs import AGE_FIELDS, CalculatorInputs, field_names, to_camel_case, to_field_name

logger = logging.getLogger(__name__)


def _format(value: float) -> str:
    # 30.0 -> "30", 0.07 -> "0.07"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def to_query_string(inputs: CalculatorInputs) -> str:
    pairs = [(to_camel_case(name), _format(value)) for name, value in inputs.to_dict().items()]
    return urlencode(pairs)


def build_share_link(inputs: CalculatorInputs, base_url: str) -> str:
    return f"{base_url.split('?', 1)[0]}?{to_query_string(inputs)}"


def parse_query_string(query: str) -> Dict[str, float]:
    """Return the recognised numeric fields of ``query`` (snake_case keys).

    A full URL is accepted as well; everything up to ``?`` is ignored.
    """
    if "?" in query:
        query = query.split("?", 1)[1]

    known = set(field_names())
    parsed: Dict[str, float] = {}
    for key, raw in parse_qsl(query, keep_blank_values=True):
        name = to_field_name(key)
        if name not in known:
            logger.debug("Ignoring unknown share-link key %r", key)
            continue
        try:
            value = float(raw)
        except ValueError:
            logger.debug("Ignoring non-numeric value %r for %s", raw, key)
            continue
        if not math.isfinite(value):
            continue
        if name in AGE_FIELDS and not value.is_integer():
            logger.debug("Ignoring fractional age %r for %s", raw, key)
            continue
        parsed[name] = value
    return parsed


def inputs_from_query(query: str, defaults: Optional[Mapping[str, float]] = None) -> CalculatorInputs:
    """Restore inputs from a share link, filling gaps from ``defaults``."""
    if defaults is None:
        defaults = DEFAULT_INPUTS
    return CalculatorInputs.from_mapping(parse_query_string(query), defaults=defaults)


__all__ = ["to_query_string", "build_share_link", "parse_query_string", "inputs_from_query"]
