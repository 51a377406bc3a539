"""
URL extraction from README text.

Only scheme-qualified URLs with a well-formed host are extracted; bare
domains and other free-text lookalikes are ignored. Markdown delimiters end
a URL, and trailing punctuation or unbalanced closing brackets are trimmed
so that ``[text](https://example.com/a)`` yields ``https://example.com/a``.
"""

import re
from typing import Iterator, List


SCHEMES = ("https", "http", "ftps", "ftp")

_HOST = (
    r"(?:"
    r"localhost"
    r"|\d{1,3}(?:\.\d{1,3}){3}"
    r"|(?:[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+(?:[a-z]{2,63}|xn--[a-z0-9-]{2,59})"
    r")\b"
)

URL_PATTERN = re.compile(
    r"\b(?:" + "|".join(SCHEMES) + r")://"
    r"(?:[\w.~%!$&'()*+,;=:-]+@)?"
    + _HOST +
    r"(?::\d{1,5})?"
    r"(?:[/?#][^\s<>\"`|]*)?",
    re.IGNORECASE,
)

_TRAILING_PUNCTUATION = ".,;:!?*'"
_BRACKET_PAIRS = {")": "(", "]": "[", "}": "{"}


def _trim(url: str) -> str:
    """Strip trailing punctuation and unbalanced closing brackets."""
    while url:
        last = url[-1]
        if last in _TRAILING_PUNCTUATION:
            url = url[:-1]
        elif last in _BRACKET_PAIRS and url.count(last) > url.count(_BRACKET_PAIRS[last]):
            url = url[:-1]
        else:
            break
    return url


def iter_urls(text: str) -> Iterator[str]:
    """Yield URLs found in ``text`` in document order, duplicates included."""
    for match in URL_PATTERN.finditer(text):
        url = _trim(match.group(0))
        if url:
            yield url


def extract_urls(text: str) -> List[str]:
    """Return every URL found in ``text`` in document order.

    Args:
        text: README contents.

    Returns:
        List of URLs. Duplicates are kept; empty text gives an empty list.
    """
    return list(iter_urls(text))
