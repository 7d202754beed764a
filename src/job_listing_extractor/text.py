import re

# Only these entities are decoded; anything else is left verbatim.
ENTITY_REPLACEMENTS = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&nbsp;", " "),
    ("&#160;", " "),
)

_TAG_RE = re.compile(r"<[^>]+>")
# Whitespace as JavaScript sees it: \s without the \x1c-\x1f separators and NEL.
_WHITESPACE_RE = re.compile(r"[^\S\x1c-\x1f\x85]+")
_CONTROL_RE = re.compile(r"[\x00-\x1f]+")
_WORD_START_RE = re.compile(r"\b\w")


def decode_entities(value: str) -> str:
    """Decode the standard HTML entities and non-breaking spaces."""
    for entity, char in ENTITY_REPLACEMENTS:
        value = value.replace(entity, char)
    return value


def strip_tags(value: str) -> str:
    """Replace every markup tag with a space so adjacent words stay apart."""
    return _TAG_RE.sub(" ", value)


def clean_text(value: str | None) -> str:
    """
    Normalize an extracted text value.

    Decodes entities, collapses whitespace runs to a single space, drops
    control characters and trims the result. None and "" become "".
    """
    if not value:
        return ""
    value = decode_entities(value)
    value = _WHITESPACE_RE.sub(" ", value)
    value = _CONTROL_RE.sub("", value)
    return value.strip()


def title_case_words(value: str) -> str:
    """
    Uppercase the first character of every word.
    Unlike str.title(), the rest of each word is left as-is.
    """
    return _WORD_START_RE.sub(lambda m: m.group(0).upper(), value)
