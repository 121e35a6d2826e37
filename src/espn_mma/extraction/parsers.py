"""HTML parsers for ESPN fighter stats and history pages."""

import logging
from typing import Optional, Union

from bs4 import BeautifulSoup, NavigableString, Tag

from .locators import (
    STAT_TABLE_ORDINALS,
    find_by_class_fragment,
    first_child,
    has_table_title,
    iter_elements,
    nth_table_body,
)
from .models import FighterStats
from .names import standardize_name
from .schemas import CLINCH_SCHEMA, FIGHT_SCHEMA, GROUND_SCHEMA, STRIKING_SCHEMA, RowSchema

logger = logging.getLogger(__name__)

HEADER_MARKER = "PlayerHeader__Main"
BIO_LIST_MARKER = "PlayerHeader__Bio_List"
RECORDS_MARKER = "PlayerHeader__Right"
FIGHT_HISTORY_MARKER = "ResponsiveTable fight-history"

# Bio list label -> FighterStats field
BIO_LABELS = {
    "HT/WT": "height_and_weight",
    "Birthdate": "birthdate",
    "Team": "team",
    "Nickname": "nickname",
    "Stance": "stance",
}

# aria-label of a record stat block -> FighterStats field
RECORD_LABELS = {
    "Wins-Losses-Draws": "win_loss_record",
    "Technical Knockout-Technical Knockout Losses": "tko_record",
    "Submissions-Submission Losses": "sub_record",
}

# (title label, FighterStats field, schema) for each stat category
STAT_TABLES = (
    ("striking", "striking_stats", STRIKING_SCHEMA),
    ("Clinch", "clinch_stats", CLINCH_SCHEMA),
    ("Ground", "ground_stats", GROUND_SCHEMA),
)


def make_soup(body: Union[bytes, str]) -> BeautifulSoup:
    """Parse a raw response body."""
    return BeautifulSoup(body, "lxml")


def cell_text(cell: Optional[Tag]) -> str:
    """
    Extract the display text of a table cell or value element.

    If the first child is an element (usually a link), its own first child
    is read instead. Anything deeper or missing yields "".
    """
    child = first_child(cell)
    if isinstance(child, Tag):
        child = first_child(child)
    if isinstance(child, NavigableString):
        return child.strip()
    return ""


def _label_text(tag: Tag) -> str:
    child = first_child(tag)
    if isinstance(child, NavigableString):
        return child.strip()
    return ""


# -----------------------------------------------------------------------------
# Table rows
# -----------------------------------------------------------------------------


def parse_row(row: Tag, schema: RowSchema):
    """
    Map the td children of a table row onto schema.row_type by position.

    Rows with fewer cells than the schema expects leave trailing fields
    empty.
    """
    cells = [c for c in row.children if isinstance(c, Tag) and c.name == "td"]
    if len(cells) != schema.expected_columns:
        logger.debug(
            f"{schema.name} row has {len(cells)} cells, expected {schema.expected_columns}"
        )

    values = {}
    for field_name, index in schema.columns:
        values[field_name] = cell_text(cells[index]) if index < len(cells) else ""
    return schema.row_type(**values)


def parse_table_rows(tbody: Optional[Tag], schema: RowSchema) -> list:
    """Parse every tr child of tbody; a missing tbody gives no rows."""
    if tbody is None:
        return []
    return [
        parse_row(row, schema)
        for row in tbody.children
        if isinstance(row, Tag) and row.name == "tr"
    ]


# -----------------------------------------------------------------------------
# Player header
# -----------------------------------------------------------------------------


def parse_fighter_header(soup: Tag, fighter: FighterStats) -> None:
    """Read first and last name from the first two text leaves of the header."""
    header = find_by_class_fragment(soup, "div", HEADER_MARKER)
    if header is None:
        return

    names = []
    for tag in iter_elements(header):
        if tag is header or tag.find(True) is not None:
            continue
        text = tag.get_text(strip=True)
        if text:
            names.append(standardize_name(text))
            if len(names) == 2:
                break

    if names and not fighter.first_name:
        fighter.first_name = names[0]
    if len(names) > 1 and not fighter.last_name:
        fighter.last_name = names[1]


def parse_bio_list(soup: Tag, fighter: FighterStats) -> None:
    """Fill height/weight, birthdate, team, nickname and stance."""
    bio_list = find_by_class_fragment(soup, "ul", BIO_LIST_MARKER)
    if bio_list is None:
        return

    for item in iter_elements(bio_list, "li"):
        for label in item.find_all("div", recursive=False):
            field_name = BIO_LABELS.get(_label_text(label))
            if field_name:
                setattr(fighter, field_name, cell_text(label.find_next_sibling()))


def parse_records(soup: Tag, fighter: FighterStats) -> None:
    """Fill win/loss, (T)KO and submission record strings."""
    container = find_by_class_fragment(soup, "div", RECORDS_MARKER)
    if container is None:
        return

    for block in iter_elements(container, "div"):
        field_name = RECORD_LABELS.get(block.get("aria-label", ""))
        if field_name:
            setattr(fighter, field_name, cell_text(block.find_next_sibling()))


# -----------------------------------------------------------------------------
# Pages
# -----------------------------------------------------------------------------


def parse_stat_table(soup: Tag, label: str, schema: RowSchema) -> list:
    """Rows of the stat table titled label, or [] when it is absent."""
    if not has_table_title(soup, label):
        return []
    tbody = nth_table_body(soup, STAT_TABLE_ORDINALS[label])
    if tbody is None:
        logger.debug(f"'{label}' title present but no matching table")
    return parse_table_rows(tbody, schema)


def parse_stats_page(soup: Tag) -> FighterStats:
    """Parse a fighter stats page into a partial FighterStats."""
    fighter = FighterStats()
    parse_fighter_header(soup, fighter)
    parse_bio_list(soup, fighter)
    parse_records(soup, fighter)

    for label, field_name, schema in STAT_TABLES:
        setattr(fighter, field_name, parse_stat_table(soup, label, schema))

    return fighter


def parse_history_page(soup: Tag) -> FighterStats:
    """Parse a fighter history page; only the fights list is filled."""
    fighter = FighterStats()
    container = find_by_class_fragment(soup, "div", FIGHT_HISTORY_MARKER)
    if container is None:
        return fighter

    tbody = next(iter_elements(container, "tbody"), None)
    fighter.fights = parse_table_rows(tbody, FIGHT_SCHEMA)
    return fighter
