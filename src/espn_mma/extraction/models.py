"""Data models for ESPN fighter pages."""

from dataclasses import asdict, dataclass, field


@dataclass
class Fight:
    """A single row of a fighter's fight history."""

    date: str = ""
    opponent: str = ""
    event: str = ""
    result: str = ""
    decision: str = ""
    rnd: str = ""
    time: str = ""


@dataclass
class StrikingStats:
    """Per-fight striking row."""

    date: str = ""
    opponent: str = ""
    event: str = ""
    result: str = ""
    sdbl_a: str = ""  # Significant distance body strikes landed/attempted
    sdhl_a: str = ""  # Significant distance head strikes landed/attempted
    sdll_a: str = ""  # Significant distance leg strikes landed/attempted
    tsl: str = ""  # Total strikes landed
    tsa: str = ""  # Total strikes attempted
    ssl: str = ""  # Significant strikes landed
    ssa: str = ""  # Significant strikes attempted
    tsl_tsa: str = ""  # Total strikes landed/attempted
    kd: str = ""  # Knockdowns
    percent_body: str = ""
    percent_head: str = ""
    percent_leg: str = ""


@dataclass
class ClinchStats:
    """Per-fight clinch row."""

    date: str = ""
    opponent: str = ""
    event: str = ""
    result: str = ""
    scbl: str = ""  # Significant clinch body strikes landed
    scba: str = ""  # Significant clinch body strikes attempted
    schl: str = ""  # Significant clinch head strikes landed
    scha: str = ""  # Significant clinch head strikes attempted
    scll: str = ""  # Significant clinch leg strikes landed
    scla: str = ""  # Significant clinch leg strikes attempted
    rv: str = ""  # Reversals
    sr: str = ""  # Slam rate
    tdl: str = ""  # Takedowns landed
    tda: str = ""  # Takedowns attempted
    tds: str = ""  # Takedown slams
    tk_acc: str = ""  # Takedown accuracy


@dataclass
class GroundStats:
    """Per-fight ground row."""

    date: str = ""
    opponent: str = ""
    event: str = ""
    result: str = ""
    sgbl: str = ""  # Significant ground body strikes landed
    sgba: str = ""  # Significant ground body strikes attempted
    sghl: str = ""  # Significant ground head strikes landed
    sgha: str = ""  # Significant ground head strikes attempted
    sgll: str = ""  # Significant ground leg strikes landed
    sgla: str = ""  # Significant ground leg strikes attempted
    ad: str = ""  # Advances
    adtb: str = ""  # Advance to back
    adhg: str = ""  # Advance to half guard
    adtm: str = ""  # Advance to mount
    adts: str = ""  # Advance to side control
    sm: str = ""  # Submissions


# Scalar biography fields, in output order
BIO_FIELDS = (
    "first_name",
    "last_name",
    "height_and_weight",
    "birthdate",
    "team",
    "nickname",
    "stance",
    "win_loss_record",
    "tko_record",
    "sub_record",
)

# Row sequence fields and the dataclass each one holds
ROW_FIELDS = {
    "striking_stats": StrikingStats,
    "clinch_stats": ClinchStats,
    "ground_stats": GroundStats,
    "fights": Fight,
}


@dataclass
class FighterStats:
    """Accumulated record for one fighter."""

    first_name: str = ""
    last_name: str = ""
    height_and_weight: str = ""
    birthdate: str = ""
    team: str = ""
    nickname: str = ""
    stance: str = ""
    win_loss_record: str = ""
    tko_record: str = ""
    sub_record: str = ""
    striking_stats: list[StrikingStats] = field(default_factory=list)
    clinch_stats: list[ClinchStats] = field(default_factory=list)
    ground_stats: list[GroundStats] = field(default_factory=list)
    fights: list[Fight] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        """First and last name joined by a space."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def to_dict(self) -> dict:
        """Convert to the flat dictionary written to fighters.json."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "FighterStats":
        """Create from a dictionary produced by to_dict."""
        kwargs = {name: data.get(name, "") or "" for name in BIO_FIELDS}
        for name, row_type in ROW_FIELDS.items():
            kwargs[name] = [row_type(**row) for row in data.get(name) or []]
        return cls(**kwargs)
