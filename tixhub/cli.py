from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from tixhub.core.browser import EventBrowser, NO_EVENTS_MESSAGE
from tixhub.core.config import settings
from tixhub.core.date_ranges import DateFilter
from tixhub.core.logging import configure_logging
from tixhub.core.models import ALL_LOCATIONS, Category, Page

log = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tixhub", description="Find upcoming events from Ticketmaster.")
    parser.add_argument("--location", default=ALL_LOCATIONS,
                        help=f"'all' or a city name (tracked: {', '.join(settings.tracked_cities)})")
    parser.add_argument("--date", dest="date_filter", default=DateFilter.ALL.value,
                        choices=[f.value for f in DateFilter])
    parser.add_argument("--search", default="", help="match on event, venue or city name")
    parser.add_argument("--page", type=int, default=1)
    parser.add_argument("--category", default=Category.CONCERTS.value,
                        choices=[c.value for c in Category])
    parser.add_argument("--geo-point", default=None, help="geohash forwarded to the catalog")
    parser.add_argument("--json", action="store_true", help="dump the page as JSON")
    return parser


def _render_text(browser: EventBrowser, page: Page) -> List[str]:
    lines = [browser.category.heading, browser.results_heading(), ""]
    for ev in page.items:
        lines.append(f"{ev.display_month} {ev.display_day:>2}  {ev.name}")
        lines.append(f"        {ev.start_date.isoformat()} • {ev.display_time}")
        lines.append(f"        {ev.venue_city}, {ev.venue_name}")
    if page.total_pages > 1:
        # boutons grisés entre parenthèses, page courante entre crochets
        prev_ = "< Previous" if page.has_previous else "(Previous)"
        next_ = "Next >" if page.has_next else "(Next)"
        numbers = " ".join(f"[{n}]" if n == page.page else str(n) for n in page.page_numbers)
        lines.append("")
        lines.append(f"{prev_}  {numbers}  {next_}   page {page.page} of {page.total_pages}")
    return lines


async def run(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    browser = EventBrowser(category=Category(args.category), geo_point=args.geo_point)
    browser.set_date_filter(DateFilter(args.date_filter))
    browser.set_search_query(args.search)
    await browser.set_location(args.location)
    browser.set_page(args.page)

    page = browser.current_page()
    if args.json:
        print(json.dumps({
            "error": browser.error,
            "heading": browser.results_heading(),
            "page": page.model_dump(mode="json"),
        }, ensure_ascii=False, indent=2))
    else:
        if browser.error:
            print(browser.error, file=sys.stderr)
        for line in _render_text(browser, page):
            print(line)

    # "aucun événement" n'est pas un échec
    if browser.error and browser.error != NO_EVENTS_MESSAGE:
        return 1
    return 0


def main() -> None:
    configure_logging(settings.log_level)
    sys.exit(asyncio.run(run()))

if __name__ == "__main__":
    main()
