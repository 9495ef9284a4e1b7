"""
Markup normalization applied before the document is built.

Netscape exports wrap entries in unclosed <DT> tags and scatter <p> tags
between list elements. Left in place, a lenient parser nests the following
siblings inside them and the heading/list adjacency the extractor relies on
is lost, so they are removed as plain text before parsing.
"""

import re

# </dt> is intentionally absent: exports never close <DT>.
AMBIGUOUS_TAG_PATTERN = re.compile(r"<p>|</p>|<dt>", re.IGNORECASE)


def strip_ambiguous_tags(text: str) -> str:
    """
    Remove every case variant of <p>, </p> and <dt> from the text.

    This is substring replacement, not a tag-aware rewrite: matches inside
    attribute values or plain text are removed as well. The replacement is
    repeated until nothing changes, so removals that splice together a new
    match (``<<p>p>``) are handled and the result is stable.

    Args:
        text: Raw bookmark file markup

    Returns:
        Markup without the ambiguous tags
    """
    while True:
        stripped = AMBIGUOUS_TAG_PATTERN.sub("", text)
        if stripped == text:
            return stripped
        text = stripped
