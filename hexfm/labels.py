"""Text shown next to operator sliders and the parameter ids they attach to."""

from __future__ import annotations

import math
import re
from decimal import Decimal

_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_PARAM_PREFIXES = {
    "level": "levelParam",
    "delay": "delayParam",
    "attack": "attackParam",
    "hold": "holdParam",
    "decay": "decayParam",
    "sustain": "sustainParam",
    "release": "releaseParam",
    "ratio": "ratioParam",
    "mod_index": "indexParam",
    "pan": "panParam",
    "output": "audibleParam",
}

MAX_LABEL_LENGTH = 7
_LONG_NUMBER_LENGTH = 6


def format_number(value: float) -> str:
    """Shortest decimal text that reads back as ``value``, never in exponent form.

    Whole numbers keep a trailing ``.0``.
    """
    value = float(value)
    if not math.isfinite(value):
        return repr(value)
    text = repr(value)
    if "e" in text or "E" in text:
        text = f"{Decimal(text):f}"
        if "." not in text:
            text += ".0"
    return text


def initial_label_text(value: float, suffix: str) -> str:
    """Label text shown when a slider's label is first created."""
    full = format_number(value)
    if value < 100.0:
        body = full[:2]
    elif value < 1000.0:
        body = full[:3]
    else:
        body = full[:4]
    return body + suffix


def label_text(value: float, suffix: str) -> str:
    """Label text shown after the slider's value changes."""
    full = format_number(value)
    if suffix == "":
        text = full
    else:
        if value < 100.0:
            body = full[:3]
        elif value < 1000.0:
            body = full[:4]
        else:
            body = full[:5]
        text = body + suffix
    if len(full) > _LONG_NUMBER_LENGTH:
        text = text[:MAX_LABEL_LENGTH]
    return text


def parse_label_value(text: str) -> float:
    """Read the number at the start of edited label text; 0.0 if there is none."""
    match = _LEADING_NUMBER.match(text)
    if match is None:
        return 0.0
    return float(match.group(1))


def slider_param_id(kind: str, index: int) -> str:
    """Id of the parameter a slider of ``kind`` for operator ``index`` controls."""
    try:
        prefix = _PARAM_PREFIXES[kind]
    except KeyError:
        known = ", ".join(sorted(_PARAM_PREFIXES))
        raise ValueError(f"unknown slider kind {kind!r}; expected one of {known}") from None
    if index < 0:
        raise ValueError(f"operator index must not be negative, got {index}")
    return f"{prefix}{index}"