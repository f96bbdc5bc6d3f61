"""Text sanitizing utilities.

Pure functions used to clean user-facing messages before they are stored.
"""

from collections.abc import Iterable

from bs4 import BeautifulSoup, Comment

_DROPPED = ["script", "style"]


def _parse(text: str) -> BeautifulSoup:
    soup = BeautifulSoup(text, "html.parser")
    for element in soup(_DROPPED):
        element.decompose()
    for comment in soup.find_all(string=lambda node: isinstance(node, Comment)):
        comment.extract()
    return soup


def strip_tags(text: str) -> str:
    """Remove all markup from text.

    Script and style blocks are dropped together with their content, comments
    are removed, entities are decoded and surrounding whitespace is trimmed.
    Decoding can reveal markup that was entity-encoded, so the text is parsed
    again until no markup is left.

    Args:
        text: Text that may contain markup

    Returns:
        Plain text, or empty string for empty/None input.
    """
    if not text:
        return ""
    previous = None
    while text != previous:
        previous = text
        text = _parse(text).get_text()
    return text.strip()


def clean_inline_html(text: str, allowed: Iterable[str]) -> str:
    """Remove every tag except bare inline tags named in ``allowed``.

    Attributes are dropped from the tags that survive and text is
    re-escaped, so the result is safe to embed in a page.
    """
    if not text:
        return ""
    allowed_tags = {tag.lower() for tag in allowed}
    soup = _parse(text)
    for tag in soup.find_all(True):
        if tag.name in allowed_tags:
            tag.attrs = {}
        else:
            tag.unwrap()
    return str(soup).strip()
