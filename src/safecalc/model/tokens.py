"""Regex helpers for integer literals inside an arithmetic expression."""
import re

# A maximal digit run that is not part of a decimal literal (7, not 7.5 / .5 / 5.)
INTEGER_TOKEN = re.compile(r"(?<![\d.])(\d+)(?![\d.])")

# Redundant leading zeros of a literal ("007" -> "7", "00.5" -> "0.5")
LEADING_ZEROS = re.compile(r"(?<![\d.])0+(?=\d)")

WHITESPACE_RUN = re.compile(r"\s+")


def floatify_integers(expression: str) -> str:
    """Append ".0" to every integer literal: "10/4+3" -> "10.0/4.0+3.0"."""
    return INTEGER_TOKEN.sub(r"\1.0", expression)


def strip_leading_zeros(expression: str) -> str:
    return LEADING_ZEROS.sub("", expression)


def collapse_whitespace(expression: str) -> str:
    """Turn every whitespace run (tabs, line breaks) into one space."""
    return WHITESPACE_RUN.sub(" ", expression)
