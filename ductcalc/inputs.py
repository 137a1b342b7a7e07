"""
Parsing and validation of user-entered values, shared by the CLI and web apps.
"""

import math
import re
from typing import List, Optional, Sequence

_SEPARATORS = re.compile(r'[,\s]+')


def parse_number_list(text: Optional[str]) -> List[float]:
    """
    Parse a list of numbers separated by commas and/or spaces.

    Tokens that are not numbers are dropped, e.g. "10 20,abc, 30" -> [10.0, 20.0, 30.0].
    """
    if not text or not text.strip():
        return []

    numbers = []
    for token in _SEPARATORS.split(text.strip()):
        if not token:
            continue
        try:
            value = float(token)
        except ValueError:
            continue
        if not math.isnan(value):
            numbers.append(value)
    return numbers


def parse_number(value) -> float:
    """Coerce a widget value to float; blank or invalid values become 0."""
    if value is None:
        return 0.0
    if isinstance(value, str):
        values = parse_number_list(value)
        return values[0] if len(values) == 1 else 0.0
    try:
        value = float(value)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(value) else value


def broadcast_speeds(speeds: Sequence[float], count: int) -> List[float]:
    """
    Match the air speeds to the number of duct segments.

    A single speed applies to every segment; otherwise one speed per segment
    is required.

    Raises:
        ValueError: If the number of speeds is neither 1 nor count
    """
    if len(speeds) == 1:
        return [speeds[0]] * count
    if len(speeds) != count:
        raise ValueError("Air speed count must be 1 or match the number of air volumes")
    return list(speeds)


def require_value(value, message: str):
    """Raise ValueError(message) when value is empty or zero."""
    if not value:
        raise ValueError(message)
    return value


def require_positive(value, message: str):
    """Raise ValueError(message) unless value > 0."""
    if not value > 0:
        raise ValueError(message)
    return value


def prompt_number(prompt: str, default: Optional[float] = None, positive: bool = True) -> float:
    """Ask on stdin until a valid number is entered."""
    while True:
        raw = input(prompt).strip()
        if not raw and default is not None:
            return default
        try:
            value = float(raw)
        except ValueError:
            print("Please enter a valid number.")
            continue
        if positive and not value > 0:
            print("Value must be positive.")
            continue
        return value


def prompt_choice(prompt: str, options: Sequence[str], default: str) -> str:
    """Ask on stdin for one of options; blank input selects default."""
    while True:
        choice = input(f"{prompt} [{'/'.join(options)}, default {default}]: ").strip() or default
        if choice in options:
            return choice
        print("Invalid selection. Please try again.")
