"""HTML fragment building with a single escaping step."""

import re

from typing import Optional, Union

from markupsafe import Markup, escape

# Elements rendered without a closing tag
VOID_ELEMENTS = frozenset({"br", "hr", "img", "input", "link", "meta", "source"})

# Attributes whose values are URLs and pass through esc_url
URL_ATTRIBUTES = frozenset({"href", "src"})

ALLOWED_PROTOCOLS = (
    "http",
    "https",
    "ftp",
    "ftps",
    "mailto",
    "news",
    "irc",
    "gopher",
    "nntp",
    "feed",
    "telnet",
    "tel",
    "sms",
)

_PHP_FILE_RE = re.compile(r"^[a-z0-9-]+?\.php", re.IGNORECASE)

Child = Union[str, int, Markup]


def esc_url(url: Optional[str]) -> str:
    """Clean a URL for use in an attribute.

    Relative URLs and URLs using an allowed protocol are kept. A bare host
    with no colon (``example.com/x``) gets ``http://`` prepended. Anything
    else becomes an empty string, including ``javascript:`` and host:port
    strings without a scheme (``localhost:8080/x``), whose host part reads as
    an unknown protocol. The result still needs attribute escaping, which
    ``element`` applies.

    Args:
        url: URL to clean, may be None

    Returns:
        Cleaned URL or empty string
    """
    if not url:
        return ""

    cleaned = "".join(ch for ch in url.strip() if ch.isprintable())
    cleaned = cleaned.replace(" ", "%20")
    if not cleaned:
        return ""

    if (
        ":" not in cleaned
        and cleaned[0] not in "/#?"
        and not _PHP_FILE_RE.match(cleaned)
    ):
        return "http://" + cleaned

    scheme, sep, _ = cleaned.partition(":")
    if not sep or "/" in scheme or "?" in scheme or "#" in scheme:
        return cleaned

    if scheme.lower() in ALLOWED_PROTOCOLS:
        return cleaned

    return ""


def style(*declarations: tuple[str, str]) -> str:
    """Compose an inline style value from (property, value) pairs."""
    return " ".join(f"{prop}: {value};" for prop, value in declarations)


def element(
    tag: str, attrs: Optional[dict[str, Optional[str]]] = None, *children: Child
) -> Markup:
    """Build one HTML element.

    Attribute values and plain-string children are escaped here; Markup
    children are trusted and inserted as-is. Attributes set to None are
    omitted.

    Args:
        tag: Element name
        attrs: Attribute mapping in output order
        children: Text or nested Markup

    Returns:
        Escaped markup for the element
    """
    parts = [Markup("<"), Markup(tag)]
    for name, value in (attrs or {}).items():
        if value is None:
            continue
        if name in URL_ATTRIBUTES:
            value = esc_url(value)
        parts.append(Markup(' {}="{}"').format(Markup(name), value))

    if tag in VOID_ELEMENTS:
        parts.append(Markup(">"))
        return Markup("").join(parts)

    parts.append(Markup(">"))
    parts.extend(escape(child) for child in children)
    parts.append(Markup("</{}>").format(Markup(tag)))
    return Markup("").join(parts)
