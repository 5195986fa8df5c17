#!/usr/bin/env python3
"""Write a sample page_config.xlsx in the template layout.

The sample covers every page type: year and rank list pages, matchup pages
with detail rows, a text page and a callout. Useful as a starting point for a
new book or for trying quizbook-sync locally.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from quizbook.excel.template import write_template_workbook

PRO_FOOTBALL_AWARDS = "https://www.pro-football-reference.com/awards"

SAMPLE_PAGES = [
    [1, "list", "NFL MVP Challenge", "List the NFL Most Valuable Players (2000-2024).",
     "25 items – clues are years descending from 2024", 1,
     f"{PRO_FOOTBALL_AWARDS}/ap-nfl-mvp-award.htm",
     "One Year has Co-MVPs bonus points if you get the year and both players right!", "right", 3, "🧠"],
    [2, "list", "NFL Defensive Player of the Year", "List the NFL Defensive Players of the Year (2015-2024).",
     "10 items – clues are years descending from 2024", 1,
     f"{PRO_FOOTBALL_AWARDS}/ap-defensive-player-of-the-year.htm"],
    [3, "matchup", "Last 10 AFC Championship Games",
     "Fill in the teams that played in each AFC Championship game.", "", 2,
     "https://www.statmuse.com/nfl/ask/last-10-afc-championship-games"],
    [4, "matchup", "Super Bowl Matchups by Score",
     "Name the teams that played in these Super Bowls based on the final score.", "", 1,
     "https://www.pro-football-reference.com/super-bowl/",
     "Some of these were nail-biters, others were blowouts!", "right", -2, "🏆"],
    [5, "list", "NFL All-Time Touchdown Leaders", "List the top 20 all-time NFL touchdown leaders.",
     "20 items – clues are rank numbers (#1, #2 …)", 1, "https://www.espn.com/nfl/history/leaders",
     "Only one active player is on this list!", "left", 2, "🏃"],
    [6, "text", "", "Take a breather: the second half starts on the next page.", "", "", ""],
]

SAMPLE_DETAIL = (
    [[3, str(year), "vs"] for year in range(2024, 2014, -1)]
    + [
        [4, "Super Bowl LVIII (2024)", "25-22"],
        [4, "Super Bowl LVII (2023)", "38-35"],
        [4, "Super Bowl LVI (2022)", "23-20"],
        [4, "Super Bowl LV (2021)", "31-9"],
    ]
)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    p.add_argument("--out", type=Path, default=Path("page_config.xlsx"), help="Workbook to write")
    args = p.parse_args(argv)
    path = write_template_workbook(args.out, SAMPLE_PAGES, SAMPLE_DETAIL)
    print(f"wrote {path} ({len(SAMPLE_PAGES)} pages, {len(SAMPLE_DETAIL)} detail rows)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
