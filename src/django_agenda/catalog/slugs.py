"""Slug derivation for conference sessions."""

import re
import unicodedata

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def parameterize(value: str, separator: str = "-") -> str:
    """Convert a title into a URL-safe slug.

    Transliterates to ASCII, lower-cases, collapses every run of
    non-alphanumeric characters into a single *separator* and trims it
    from both ends.

    Args:
        value: The title to convert.
        separator: The character joining words in the result.

    Returns:
        The slug, e.g. ``"my-great-talk"`` for ``"My Great Talk"``.
    """
    ascii_value = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    return _NON_ALNUM_RE.sub(separator, ascii_value.lower()).strip(separator)
