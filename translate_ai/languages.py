"""Language registry: the fixed, ordered list of selectable languages."""

from rapidfuzz import process

LANGUAGES: list[str] = [
    "English",
    "Italian",
    "Spanish",
    "French",
    "German",
    "Chinese (Simplified)",
    "Chinese (Traditional)",
    "Japanese",
    "Korean",
    "Portuguese",
    "Russian",
    "Dutch",
    "Arabic",
    "Swedish",
    "Greek",
]


def is_supported(name: str) -> bool:
    """Return True if name is an exact registry entry."""
    return name in LANGUAGES


def resolve(name: str, score_cutoff: float = 85.0) -> str:
    """Map a loosely written language name onto a registry entry.

    Exact and case-insensitive matches win outright; otherwise the closest
    entry by RapidFuzz WRatio is returned if it scores at least score_cutoff.

    Args:
        name: Language name as typed by a user or set in the environment.
        score_cutoff: Minimum similarity (0-100) for a fuzzy match.

    Returns:
        The registry entry.

    Raises:
        ValueError: If nothing in the registry is close enough.
    """
    candidate = name.strip()
    if candidate in LANGUAGES:
        return candidate

    for language in LANGUAGES:
        if language.casefold() == candidate.casefold():
            return language

    match = process.extractOne(
        candidate,
        LANGUAGES,
        processor=str.casefold,
        score_cutoff=score_cutoff,
    )
    if match is None:
        raise ValueError(f"Unknown language '{name}'. Available: {LANGUAGES}")
    return match[0]
