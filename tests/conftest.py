"""Shared HTML fixtures for ESPN page tests."""

import pytest

STRIKING_ROW = [
    "3/15/2024", "Jane Doe", "Event X", "W", "10/20", "5/10", "2/3", "40",
    "60", "30", "45", "30/45", "1", "50%", "30%", "20%",
]
CLINCH_ROW = [
    "3/15/2024", "Jane Doe", "Event X", "W", "1", "2", "3", "4",
    "5", "6", "0", "0", "2", "5", "1", "40%",
]
GROUND_ROW = [
    "3/15/2024", "Jane Doe", "Event X", "W", "7", "8", "9", "10",
    "11", "12", "3", "1", "0", "1", "1", "2",
]


def make_row(values: list[str]) -> str:
    """Render a tr with opponent, event and result wrapped in links."""
    cells = []
    for index, value in enumerate(values):
        if index in (1, 2):
            cells.append(f'<td class="Table__TD"><a href="#">{value}</a></td>')
        elif index == 3:
            cells.append(f'<td class="Table__TD"><div class="ResultCell">{value}</div></td>')
        else:
            cells.append(f'<td class="Table__TD">{value}</td>')
    return "<tr class=\"Table__TR\">" + "".join(cells) + "</tr>"


def make_stat_table(title: str, rows: list[list[str]]) -> str:
    """Render a titled stat panel."""
    body = "".join(make_row(r) for r in rows)
    return (
        f'<section class="ResponsiveTable"><div class="Table__Title">{title}</div>'
        f'<table class="Table"><thead><tr><th>Date</th></tr></thead>'
        f'<tbody class="Table__TBODY">{body}</tbody></table></section>'
    )


HEADER = """
<div class="PlayerHeader__Main flex items-center">
  <div class="PlayerHeader__Image"><img src="jones.png"></div>
  <h1 class="PlayerHeader__Name flex"><span class="truncate">Jon</span><span class="truncate">Jones</span></h1>
  <span class="PlayerHeader__Team">Light Heavyweight</span>
</div>
<ul class="PlayerHeader__Bio_List flex flex-column">
  <li><div class="ttu">HT/WT</div><div class="fw-medium clr-black"><div>6'4", 205 lbs</div></div></li>
  <li><div class="ttu">Reach</div><div class="fw-medium clr-black"><div>84.5"</div></div></li>
  <li><div class="ttu">Stance</div><div class="fw-medium clr-black"><div>Orthodox</div></div></li>
</ul>
<div class="PlayerHeader__Right flex">
  <div class="StatBlock"><div class="StatBlockInner__Label" aria-label="Wins-Losses-Draws">W-L-D</div><div class="StatBlockInner__Value">27-1-0</div></div>
  <div class="StatBlock"><div class="StatBlockInner__Label" aria-label="Technical Knockout-Technical Knockout Losses">(T)KO</div><div class="StatBlockInner__Value">10-0</div></div>
  <div class="StatBlock"><div class="StatBlockInner__Label" aria-label="Submissions-Submission Losses">SUB</div><div class="StatBlockInner__Value">7-0</div></div>
</div>
"""


def make_page(*sections: str) -> str:
    """Wrap sections in a full HTML document."""
    return "<html><head><title>ESPN</title></head><body>" + "".join(sections) + "</body></html>"


@pytest.fixture
def stats_page() -> str:
    """Stats page with bio header and all three stat tables."""
    return make_page(
        HEADER,
        make_stat_table("striking", [STRIKING_ROW]),
        make_stat_table("Clinch", [CLINCH_ROW, CLINCH_ROW]),
        make_stat_table("Ground", [GROUND_ROW]),
    )


@pytest.fixture
def history_page() -> str:
    """History page with a decoy table before the fight history."""
    fights = [
        ["1/1/2024", "Stipe Miocic", "UFC 309", "W", "KO/TKO", "3", "4:29"],
        ["3/4/2023", "Ciryl Gane", "UFC 285", "W", "Submission", "1", "2:04"],
    ]
    return make_page(
        '<table><tbody><tr><td>decoy</td></tr></tbody></table>',
        '<div class="ResponsiveTable fight-history"><div class="Table__Title">Fight History</div>'
        "<table><tbody>" + "".join(make_row(f) for f in fights) + "</tbody></table></div>",
        '<a href="/mma/fighter/stats/_/id/2335639/jon-jones">Stats</a>',
        '<a href="/mma/schedule/_/league/ufc">Schedule</a>',
        '<a href="/mma/fighter/bio/_/id/2335639/jon-jones">Bio</a>',
        '<a href="https://twitter.com/espnmma">Twitter</a>',
    )
