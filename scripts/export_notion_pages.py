"""Export Notion pages matching a title query to markdown files."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

from notion2md import NotionClient, get_pages_content, list_pages
from notion2md.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

_UNSAFE_CHARS_RE = re.compile(r"[^\w\- ]+")


def main() -> None:
    parser = argparse.ArgumentParser(description="Render Notion pages to markdown.")
    parser.add_argument("query", help="Substring of the page titles to export")
    parser.add_argument("--token", help="Integration token (defaults to NOTION2MD_TOKEN)")
    parser.add_argument("--output-dir", help="Write one .md file per page here instead of stdout")
    parser.add_argument("--log-level", help="Log level (defaults to NOTION2MD_LOG_LEVEL)")
    args = parser.parse_args()

    configure_logging(args.log_level)

    with NotionClient(args.token) as client:
        refs = list_pages(args.query, client)
        logger.info("Found %d pages for %r", len(refs), args.query)
        pages = get_pages_content(refs, client)

    if not args.output_dir:
        for page in pages:
            print(f"# {page.title}\n\n{page.content}")
        return

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    for page in pages:
        name = _UNSAFE_CHARS_RE.sub("_", page.title).strip() or page.id
        path = output_dir / f"{name}.md"
        path.write_text(page.content, encoding="utf-8")
        logger.info("Wrote %s", path, extra={"page_id": page.id})


if __name__ == "__main__":
    main()
