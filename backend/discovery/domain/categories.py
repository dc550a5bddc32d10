"""Category naming: slugs, display names and the fallback catalogue.

The lookup table and default catalogue are fixed data loaded once at import.
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import List

from .paper import Category

CATEGORY_DISPLAY_NAMES = MappingProxyType({
    "Database expert": "Database Expert",
    "website": "Website",
    "mobile app": "Mobile App",
    "cai (E-Learning/Computer-Aided Instruction Systems)": "CAI",
    "software/hardware": "Software/Hardware",
})

# (slug, display_name, raw_name)
DEFAULT_CATEGORIES: tuple[tuple[str, str, str], ...] = (
    ("database-expert", "Database Expert", "Database expert"),
    ("website", "Website", "website"),
    ("mobile-app", "Mobile App", "mobile app"),
    ("cai", "CAI", "cai (E-Learning/Computer-Aided Instruction Systems)"),
    ("software-hardware", "Software/Hardware", "software/hardware"),
)

_NON_SLUG_RUN = re.compile(r"[^a-z0-9]+")


def slugify(raw: str) -> str:
    return _NON_SLUG_RUN.sub("-", raw.lower()).strip("-")


def display_name(raw: str) -> str:
    return CATEGORY_DISPLAY_NAMES.get(raw, raw)


def normalize(raw: str) -> Category:
    """Build an empty Category for a raw store label."""
    return Category(slug=slugify(raw), display_name=display_name(raw), raw_name=raw)


def default_catalogue() -> List[Category]:
    return [
        Category(slug=slug, display_name=name, raw_name=raw)
        for slug, name, raw in DEFAULT_CATEGORIES
    ]
