"""ABOUTME: Text normalization utilities for consistent name matching.
ABOUTME: Provides slugify for matching ability and item names against the modifier tables."""

import re
import unicodedata

# Placeholder values the data layer uses for "nothing selected"
NONE_SENTINEL = "none"


def slugify(text: str | None) -> str:
    """Convert an ability, item or move name to a normalized lookup key.

    Args:
        text: Input text to slugify. None is treated as empty.

    Returns:
        Normalized slug string.

    Examples:
        >>> slugify("Thick Fat")
        'thick_fat'
        >>> slugify("well-baked-body")
        'well_baked_body'
        >>> slugify("  Air Balloon  ")
        'air_balloon'
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFKD", text)
    text = text.encode("ascii", "ignore").decode("ascii")
    text = text.lower()

    # Hyphens and whitespace are interchangeable in PokeAPI and display names
    text = re.sub(r"[-\s]+", "_", text)
    text = re.sub(r"[^a-z0-9_]", "", text)
    text = re.sub(r"_+", "_", text)

    return text.strip("_")


def is_unset(value: str | None) -> bool:
    """Return True for None, blank strings and the "none" placeholder."""
    return value is None or slugify(value) in ("", NONE_SENTINEL)
