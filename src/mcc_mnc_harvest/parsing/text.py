# ABOUTME: Cell text cleanup and status canonicalization
# ABOUTME: Strips citation markers and trailing bracket references, normalizes quotes and status spellings

from collections.abc import Iterable

CITATION_NEEDED = "[citation needed]"

# Curly double quotes found in operator and brand names
_CURLY_QUOTES = str.maketrans({"“": '"', "”": '"'})

STATUS_ALIASES = {
    "Not Operational": "Not operational",
    "Not opearational": "Not operational",
    "operational": "Operational",
}


def normalize(raw: str) -> str | None:
    """Clean a table cell's text, returning None when nothing is left.

    >>> normalize("foo [7]")
    'foo'
    >>> normalize("[7]") is None
    True
    """
    text = raw.strip()
    text = text.replace(CITATION_NEEDED, "")

    if text.startswith("[") and text.endswith("]"):
        # Reference only, e.g. "[7]"
        text = ""
    elif text.endswith("]") and "[" in text:
        # Trailing reference, e.g. "foo [7]". Only the last bracket group goes and no
        # character before the "[" is lost: "foo [1][2]" -> "foo [1]", "foo[7]" -> "foo"
        text = text[: text.rfind("[")].rstrip()

    text = text.translate(_CURLY_QUOTES)
    return text or None


def canonicalize_status(status: str | None) -> str | None:
    """Fold known spelling variants of a status onto one form."""
    if status is None:
        return None
    return STATUS_ALIASES.get(status, status)


def normalize_status_codes(codes: Iterable[str | None]) -> list[str]:
    """Canonicalize, deduplicate and sort a collection of status values."""
    return sorted({canonical for code in codes if (canonical := canonicalize_status(code))})
