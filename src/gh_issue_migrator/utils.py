"""
Utility functions for the GitHub issue migration tool.
"""

from __future__ import annotations

import logging
import re

_RANGE_TOKEN = re.compile(r"^(\d+)-(\d+)$")
_HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def setup_logging(*, debug: bool = False) -> None:
    """Configure logging for the migration process.

    Args:
        debug: Show debug output (including PyGithub's request logging) instead of warnings only.
    """
    level = logging.DEBUG if debug else logging.WARNING

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)


def parse_issue_list(ilist: str) -> list[int]:
    """Expand a comma separated list of issue numbers and inclusive ranges.

    "12,3-5,2,6,35-38" --> [2, 3, 4, 5, 6, 12, 35, 36, 37, 38]

    Raises:
        ValueError: If a token is neither a number nor a dashed range
    """
    numbers: set[int] = set()
    for raw_token in ilist.split(","):
        token = raw_token.strip()
        if not token:
            continue
        match = _RANGE_TOKEN.match(token)
        if match:
            start, end = int(match.group(1)), int(match.group(2))
            numbers.update(range(start, end + 1))
        else:
            numbers.add(int(token))
    return sorted(numbers)


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Decode a 6-digit hex color (e.g. "d73a4a") into an RGB triple."""
    match = _HEX_COLOR.match(hex_color.strip())
    if not match:
        msg = f"Invalid hex color: {hex_color!r}"
        raise ValueError(msg)
    red, green, blue = (int(group, 16) for group in match.groups())
    return red, green, blue


def color_swatch(hex_color: str) -> str:
    """Return a two-character block painted with the given color (24-bit ANSI background)."""
    red, green, blue = hex_to_rgb(hex_color)
    return f"\x1b[48;2;{red};{green};{blue}m  \x1b[0m"


def mask_token(token: str | None) -> str:
    """Hide all but the last four characters of a token for debug output."""
    if not token:
        return "<none>"
    return "*" * max(len(token) - 4, 0) + token[-4:]
