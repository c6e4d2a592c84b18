"""
Duration Formatting Module
"""

from datetime import timedelta
from typing import Union


def format_duration(elapsed: Union[timedelta, float, int]) -> str:
    """
    Format an elapsed duration as "HH:MM:SS".

    Fractional seconds are truncated. Hours keep counting past 24.

    Args:
        elapsed: Duration as a timedelta or a number of seconds

    Returns:
        Zero-padded "HH:MM:SS" string
    """
    if isinstance(elapsed, timedelta):
        elapsed = elapsed.total_seconds()

    if elapsed < 0:
        raise ValueError(f"Duration must not be negative: {elapsed}")

    total_seconds = int(elapsed)
    seconds = total_seconds % 60
    minutes = (total_seconds // 60) % 60
    hours = total_seconds // 3600
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
