#!/usr/bin/env python3
"""sandblast CLI: extract the title and main text of a page."""
import argparse
import logging
import pathlib
import sys

from .config import SandblastConfig, get_config, set_config
from .element import debug_string
from .errors import SandblastError
from .pipeline import extract_ex, parse_html
from .fetch import decode_body, fetch_url
from .options import ExtractOptions

logger = logging.getLogger(__name__)


def load_markup(source: str) -> str:
    if source.startswith(("http://", "https://")):
        result = fetch_url(source)
        if result.status != 200:
            logger.warning(f"{source} answered with status {result.status}")
        return result.body
    body, _ = decode_body(pathlib.Path(source).read_bytes())
    return body


def cmd_extract(args) -> None:
    config = get_config()
    options = ExtractOptions.from_config(config)
    if args.keep_links:
        options = ExtractOptions(keep_links=True, destructive=options.destructive)

    try:
        markup = load_markup(args.source)
    except OSError as e:
        print(f"Could not read {args.source}: {e}", file=sys.stderr)
        sys.exit(1)
    except SandblastError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    try:
        result = extract_ex(parse_html(markup), options)
    except SandblastError as e:
        print(f"Extraction error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"TITLE: {result.title}")
    if args.debug:
        print(f"SIMPLIFIED:\n{debug_string(result.simplified)}")
        print(f"FLATTENED:\n{debug_string(result.flattened)}")
        print(f"CLEANED:\n{debug_string(result.cleaned)}")
    print(f"TEXT:\n{result.text}")


def main(argv=None):
    ap = argparse.ArgumentParser(prog="sandblast", description="Extract the readable text of a web page")
    ap.add_argument("source", help="URL (http/https) or path of a local HTML file")
    ap.add_argument("--debug", action="store_true", help="Dump the simplified, flattened and cleaned trees")
    ap.add_argument("--keep-links", action="store_true", help="Number links and list their targets after the text")
    ap.add_argument("--config", help="Path of a YAML configuration file")
    ap.add_argument("--verbose", "-v", action="store_true", help="Log at DEBUG level")

    args = ap.parse_args(argv)
    if args.config:
        set_config(SandblastConfig(args.config))

    level = "DEBUG" if args.verbose else str(get_config().get('logging.level', 'WARNING')).upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    cmd_extract(args)

if __name__ == "__main__":
    main()
