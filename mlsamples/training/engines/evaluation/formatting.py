# mlsamples/training/engines/evaluation/formatting.py
from __future__ import annotations

import math


def trim_decimal(value: float, places: int, leading_zero: bool = True) -> str:
    """
    At most `places` decimals, trailing zeros dropped (0.## / #.## style).
    """
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return "NaN"
    text = f"{value:.{places}f}".rstrip("0").rstrip(".")
    if text in ("", "-0"):
        text = "0"
    if not leading_zero and text.startswith("0.") and len(text) > 2:
        text = text[1:]
    if not leading_zero and text.startswith("-0.") and len(text) > 3:
        text = "-" + text[2:]
    return text


def percent(value: float) -> str:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return "NaN"
    return f"{value:.2%}"
