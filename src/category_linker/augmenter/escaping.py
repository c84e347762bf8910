"""Output escaping for dynamic values in emitted HTML.

Text and attribute escaping delegate to markupsafe. URL escaping cleans
the value, rejects unsafe schemes and then escapes it for an attribute.
"""

from __future__ import annotations

import re

from markupsafe import Markup, escape

ALLOWED_PROTOCOLS = (
    "http", "https", "ftp", "ftps", "mailto", "news", "irc", "gopher",
    "nntp", "feed", "telnet", "mms", "rtsp", "sms", "svn", "tel", "fax",
    "xmpp", "webcal", "urn",
)

_DISALLOWED_URL_CHARS = re.compile(r"[^a-z0-9\-~+_.?#=!&;,/:%@$|*'()\[\]\x80-\U0010ffff]", re.I)
_LINE_BREAK_ESCAPES = re.compile(r"%0[ad]", re.I)
_SCHEME = re.compile(r"^([a-z][a-z0-9+.\-]*):", re.I)
_PHP_FILE = re.compile(r"^[a-z0-9\-]+?\.php", re.I)


def escape_html(text: object) -> Markup:
    """Escape text for an HTML text node."""
    return escape(text)


def escape_attr(text: object) -> Markup:
    """Escape text for a quoted HTML attribute value."""
    return escape(text)


def escape_url(url: str | None, protocols: tuple[str, ...] = ALLOWED_PROTOCOLS) -> Markup:
    """Clean a URL for use in an href attribute.

    Args:
        url: Raw URL, absolute or site-relative
        protocols: Schemes that are allowed through

    Returns:
        Attribute-safe URL, or an empty Markup when the URL is rejected
    """
    if not url:
        return Markup("")

    cleaned = str(url).strip().replace(" ", "%20")
    cleaned = _DISALLOWED_URL_CHARS.sub("", cleaned)
    if not cleaned:
        return Markup("")

    # Strip encoded CR/LF until none remain
    while _LINE_BREAK_ESCAPES.search(cleaned):
        cleaned = _LINE_BREAK_ESCAPES.sub("", cleaned)

    match = _SCHEME.match(cleaned)
    if match is None:
        if ":" not in cleaned and cleaned[0] not in "/#?" and not _PHP_FILE.match(cleaned):
            cleaned = "http://" + cleaned
        elif ":" in cleaned and cleaned[0] not in "/#?":
            # Something before the colon that is not a valid scheme
            return Markup("")
    elif match.group(1).lower() not in protocols:
        return Markup("")

    return escape(cleaned)
