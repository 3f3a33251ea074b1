"""URL shape checks for extracted evidence values."""

import re

IS_URL_PATTERN = re.compile(r"(ht|f)tps?://.*", re.IGNORECASE)


def is_url(text: str | None) -> bool:
    """Check whether text plausibly is a URL.

    Only the scheme is checked: http, https, ftp or ftps followed by "://".
    The whole string must match, so embedded newlines are rejected.

    Args:
        text: Candidate string

    Returns:
        True if the string looks like a URL, False otherwise

    Example:
        >>> is_url("https://www.gnu.org/software/hello/")
        True
        >>> is_url("not a url")
        False
    """
    if not text:
        return False
    return IS_URL_PATTERN.fullmatch(text) is not None
