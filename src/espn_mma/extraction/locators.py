"""Structural lookups over parsed ESPN pages."""

from itertools import islice
from typing import Iterator, Optional

from bs4 import NavigableString, Tag

# Title element class used by every stat table panel
TABLE_TITLE_CLASS = "Table__Title"

# Stat table title label -> number of same-shaped tables preceding it
STAT_TABLE_ORDINALS = {
    "striking": 0,
    "Clinch": 1,
    "Ground": 2,
}


def iter_elements(root: Tag, name: Optional[str] = None) -> Iterator[Tag]:
    """
    Yield element nodes in pre-order, depth-first, left-to-right.

    The root itself is yielded first when it matches.

    Args:
        root: Subtree to walk
        name: Restrict to elements with this tag name
    """
    if name is None or root.name == name:
        yield root
    for node in root.descendants:
        if isinstance(node, Tag) and (name is None or node.name == name):
            yield node


def class_value(tag: Tag) -> str:
    """Return the class attribute as a single space-joined string."""
    value = tag.get("class")
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return value


def has_class_fragment(tag: Tag, marker: str) -> bool:
    """Substring test of marker against the element's class attribute."""
    return marker in class_value(tag)


def find_by_class_fragment(root: Tag, name: str, marker: str) -> Optional[Tag]:
    """Find the first element named name whose class contains marker."""
    for tag in iter_elements(root, name):
        if has_class_fragment(tag, marker):
            return tag
    return None


def first_child(tag: Optional[Tag]):
    """First child node of tag (element or text), or None."""
    if tag is None or not tag.contents:
        return None
    return tag.contents[0]


def has_table_title(root: Tag, label: str) -> bool:
    """Check whether a stat panel titled exactly label is present."""
    for tag in iter_elements(root, "div"):
        if not has_class_fragment(tag, TABLE_TITLE_CLASS):
            continue
        child = first_child(tag)
        if isinstance(child, NavigableString) and child.strip() == label:
            return True
    return False


def nth_table_body(root: Tag, ordinal: int) -> Optional[Tag]:
    """
    Return the tbody at position ordinal among all tbody elements.

    Stat tables on a fighter page share the same markup, so the only
    reliable distinction is how many of them come first. Returns None
    when the page has fewer tables.
    """
    return next(islice(iter_elements(root, "tbody"), ordinal, None), None)
