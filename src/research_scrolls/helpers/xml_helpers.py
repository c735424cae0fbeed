"""
Tolerant tag scanner for the XML payloads returned by arXiv and PubMed.

These helpers work on plain substrings rather than a DOM: a truncated or
otherwise malformed document yields empty strings instead of an exception.
"""

import re
from collections.abc import Iterator

_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&apos;", "'"),
    ("&amp;", "&"),  # last, so "&amp;lt;" decodes to "&lt;" and not "<"
)

_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")
_ATTRIBUTE_RE = re.compile(r'([\w:-]+)\s*=\s*"([^"]*)"')


def extract_between(text: str, start_tag: str, end_tag: str) -> str:
    """Return the text between `start_tag` and the next `end_tag` after it.

    Returns "" if either marker is missing.
    """
    start = text.find(start_tag)
    if start == -1:
        return ""
    value_start = start + len(start_tag)
    end = text.find(end_tag, value_start)
    if end == -1:
        return ""
    return text[value_start:end]


def _element_pattern(tag: str) -> re.Pattern[str]:
    return re.compile(
        rf"<{re.escape(tag)}(\s[^>]*)?>(.*?)</{re.escape(tag)}>", re.DOTALL
    )


def iter_elements(text: str, tag: str) -> Iterator[tuple[str, str]]:
    """Yield `(attributes, inner_text)` for each `<tag ...>...</tag>` in order.

    Nested elements with the same tag name are not supported.
    """
    for match in _element_pattern(tag).finditer(text):
        yield (match.group(1) or "").strip(), match.group(2)


def extract_tag(text: str, tag: str) -> str:
    """Return the inner text of the first `tag` element, or "" if absent."""
    for _, inner in iter_elements(text, tag):
        return inner
    return ""


def get_attribute(attributes: str, name: str) -> str:
    """Return the value of attribute `name` from a raw attribute string."""
    for key, value in _ATTRIBUTE_RE.findall(attributes):
        if key == name:
            return value
    return ""


def iter_start_tags(text: str, tag: str) -> Iterator[str]:
    """Yield the raw attribute string of every `<tag ...>` or `<tag .../>` in order."""
    for match in re.finditer(rf"<{re.escape(tag)}(\s[^>]*?)/?>", text):
        yield match.group(1)


def find_attribute_values(text: str, tag: str, name: str) -> list[str]:
    """Return the non-empty `name` attribute values of every `tag` start tag."""
    values = []
    for attributes in iter_start_tags(text, tag):
        value = get_attribute(attributes, name)
        if value:
            values.append(value)
    return values


def decode_entities(text: str) -> str:
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text


def strip_tags(text: str) -> str:
    return _TAG_RE.sub("", text)


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def clean_text(text: str) -> str:
    """Decode entities, drop leftover markup, and normalize whitespace."""
    return collapse_whitespace(strip_tags(decode_entities(text)))
