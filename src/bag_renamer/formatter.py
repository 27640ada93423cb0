"""Bag name template substitution."""

from __future__ import annotations

import re
from typing import Mapping

PLACEHOLDERS = ("grid", "biome", "landmark", "player")
TRIM_CHARS = " -"

_PLACEHOLDER_RE = re.compile(r"\{(" + "|".join(PLACEHOLDERS) + r")\}")


def format_bag_name(template: str, attributes: Mapping[str, str]) -> str:
    """Substitute known placeholders in one pass and trim dangling separators.

    Unknown ``{tokens}`` are kept as written. An empty return value means the
    bag should keep its current name.
    """

    def _substitute(match: re.Match[str]) -> str:
        return attributes.get(match.group(1), "")

    return _PLACEHOLDER_RE.sub(_substitute, template).strip(TRIM_CHARS)
