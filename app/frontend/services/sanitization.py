"""Best-effort stripping of script-injection patterns from user text.

This is a filter, not an HTML encoder or parser. It removes markup tags,
stray angle brackets, ``javascript:`` and inline ``on<event>=`` handler
patterns, then trims. Passes repeat until the text stops changing, so a
pattern rebuilt from two removed fragments is removed too and the function
is idempotent. Output must still be escaped by whatever renders it.
"""
import re
from typing import Optional


HTML_ELEMENTS = (
    "a", "abbr", "audio", "b", "base", "body", "br", "button", "code", "div",
    "em", "embed", "form", "frame", "frameset", "h[1-6]", "head", "html", "i",
    "iframe", "img", "input", "label", "li", "link", "marquee", "math", "meta",
    "noscript", "object", "ol", "option", "p", "pre", "script", "select",
    "small", "source", "span", "strong", "style", "sub", "summary", "sup", "svg",
    "table", "td", "template", "textarea", "title", "tr", "u", "ul", "video",
)

# HTML tags such as <b>, </b>, <img src=x>. Anything else in brackets, like
# "a < b" or List<String>, is left to the bracket pass and keeps its words.
MARKUP_PATTERN = re.compile(
    r"</?(?:" + "|".join(HTML_ELEMENTS) + r")(?=[\s/>])[^<>]*>",
    re.IGNORECASE
)

ANGLE_BRACKET_PATTERN = re.compile(r"[<>]")

JAVASCRIPT_PROTOCOL_PATTERN = re.compile(r"javascript:", re.IGNORECASE)

EVENT_HANDLER_PATTERN = re.compile(r"on\w+=", re.IGNORECASE | re.ASCII)

UNSAFE_PATTERNS = (
    MARKUP_PATTERN,
    ANGLE_BRACKET_PATTERN,
    JAVASCRIPT_PROTOCOL_PATTERN,
    EVENT_HANDLER_PATTERN,
)


def _strip_once(text: str) -> str:
    for pattern in UNSAFE_PATTERNS:
        text = pattern.sub("", text)
    return text.strip()


def sanitize(value: Optional[str]) -> str:
    """
    Return ``value`` with unsafe patterns removed and whitespace trimmed.

    Empty, None or non-string input yields ``""``.
    """
    if not isinstance(value, str) or not value:
        return ""

    result = _strip_once(value)
    while True:
        again = _strip_once(result)
        if again == result:
            return result
        result = again
