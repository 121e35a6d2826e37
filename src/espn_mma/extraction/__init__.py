"""Structured extraction from ESPN fighter pages."""

from .models import ClinchStats, Fight, FighterStats, GroundStats, StrikingStats
from .names import name_from_url, split_name, standardize_name
from .parsers import make_soup, parse_history_page, parse_stats_page

__all__ = [
    "ClinchStats",
    "Fight",
    "FighterStats",
    "GroundStats",
    "StrikingStats",
    "make_soup",
    "name_from_url",
    "parse_history_page",
    "parse_stats_page",
    "split_name",
    "standardize_name",
]
