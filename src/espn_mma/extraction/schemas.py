"""Positional column layouts for ESPN stat tables."""

from dataclasses import dataclass, fields

from .models import ClinchStats, Fight, GroundStats, StrikingStats

# Leading columns shared by every per-fight table
LEADING_COLUMNS = ("date", "opponent", "event", "result")


@dataclass(frozen=True)
class RowSchema:
    """
    Ordered mapping of row dataclass fields to table cell positions.

    Args:
        name: Human-readable category name used in log messages
        row_type: Dataclass instantiated for each row
        columns: (field_name, column_index) pairs in cell order
    """

    name: str
    row_type: type
    columns: tuple[tuple[str, int], ...]

    def __post_init__(self):
        known = {f.name for f in fields(self.row_type)}
        unknown = [name for name, _ in self.columns if name not in known]
        if unknown:
            raise ValueError(f"{self.name} schema names unknown fields: {unknown}")
        indexes = [index for _, index in self.columns]
        if len(set(indexes)) != len(indexes):
            raise ValueError(f"{self.name} schema maps two fields to one column")

    @property
    def expected_columns(self) -> int:
        """Number of cells a well-formed row has."""
        return max(index for _, index in self.columns) + 1


def _positional(*names: str) -> tuple[tuple[str, int], ...]:
    return tuple((name, index) for index, name in enumerate(names))


FIGHT_SCHEMA = RowSchema(
    name="fight history",
    row_type=Fight,
    columns=_positional(*LEADING_COLUMNS, "decision", "rnd", "time"),
)

STRIKING_SCHEMA = RowSchema(
    name="striking",
    row_type=StrikingStats,
    columns=_positional(
        *LEADING_COLUMNS,
        "sdbl_a",
        "sdhl_a",
        "sdll_a",
        "tsl",
        "tsa",
        "ssl",
        "ssa",
        "tsl_tsa",
        "kd",
        "percent_body",
        "percent_head",
        "percent_leg",
    ),
)

# 16 columns: six clinch strike counts, then reversals, slams and takedowns
CLINCH_SCHEMA = RowSchema(
    name="clinch",
    row_type=ClinchStats,
    columns=_positional(
        *LEADING_COLUMNS,
        "scbl",
        "scba",
        "schl",
        "scha",
        "scll",
        "scla",
        "rv",
        "sr",
        "tdl",
        "tda",
        "tds",
        "tk_acc",
    ),
)

GROUND_SCHEMA = RowSchema(
    name="ground",
    row_type=GroundStats,
    columns=_positional(
        *LEADING_COLUMNS,
        "sgbl",
        "sgba",
        "sghl",
        "sgha",
        "sgll",
        "sgla",
        "ad",
        "adtb",
        "adhg",
        "adtm",
        "adts",
        "sm",
    ),
)
