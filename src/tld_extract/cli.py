"""
Command line interface.

    tld-extract parse https://www.example.co.uk/path forum.example.com
    tld-extract fetch --cache-dir ./data/psl
    tld-extract stats --psl public_suffix_list.dat
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from tld_extract.config import get_config
from tld_extract.errors import TLDExtractError
from tld_extract.extractor import TLDExtract
from tld_extract.sources import SnapshotStore, fetch_psl

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    config = get_config()
    parser = argparse.ArgumentParser(
        prog="tld-extract",
        description="Split hostnames into root domain, TLD, second-level domain and subdomain.",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        help="Logging level (defaults to config).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Parse URLs or hostnames.")
    parse_cmd.add_argument("inputs", nargs="+", help="URLs or hostnames to parse.")
    parse_cmd.add_argument(
        "--quick",
        action="store_true",
        help="Only apply normal rules (skip exceptions and wildcards).",
    )
    parse_cmd.add_argument(
        "--psl",
        type=Path,
        default=None,
        help="PSL file (.dat or .dat.zst); defaults to the configured source.",
    )
    parse_cmd.add_argument(
        "--json", action="store_true", help="Print one JSON object per input."
    )

    fetch_cmd = subparsers.add_parser("fetch", help="Download and cache the PSL.")
    fetch_cmd.add_argument(
        "--url",
        default=config.psl.source_url,
        help="PSL URL (defaults to config).",
    )
    fetch_cmd.add_argument(
        "--cache-dir",
        type=Path,
        default=config.psl.cache_dir,
        help="Snapshot directory (defaults to config.psl.cache_dir).",
    )

    stats_cmd = subparsers.add_parser("stats", help="Print rule counts.")
    stats_cmd.add_argument(
        "--psl",
        type=Path,
        default=None,
        help="PSL file (.dat or .dat.zst); defaults to the configured source.",
    )
    return parser


def _load_extractor(psl_path: Optional[Path]) -> TLDExtract:
    if psl_path is not None:
        return TLDExtract.from_file(psl_path)
    return TLDExtract.from_config(get_config())


def cmd_parse(args: argparse.Namespace) -> int:
    """Parse each input; exit code 1 if any input did not match."""
    extractor = _load_extractor(args.psl)
    missed = 0

    for value in args.inputs:
        result = extractor.parse(value, quick=args.quick)
        if result is None:
            missed += 1

        if args.json:
            payload = {"input": value, "match": result is not None}
            if result is not None:
                payload.update(result.to_dict())
            print(json.dumps(payload, ensure_ascii=False))
            continue

        print(value)
        if result is None:
            print("  no match")
            continue
        print(f"  root domain         : {result.root_domain or '-'}")
        print(f"  top level domain    : {result.top_level_domain or '-'}")
        print(f"  second level domain : {result.second_level_domain or '-'}")
        print(f"  subdomain           : {result.sub_domain or '-'}")

    return 1 if missed else 0


def cmd_fetch(args: argparse.Namespace) -> int:
    """Download the PSL, validate it and store a snapshot."""
    config = get_config()
    data = fetch_psl(args.url, timeout=config.psl.fetch_timeout)
    rule_set = TLDExtract.from_bytes(data, source_url=args.url).rule_set

    store = SnapshotStore(args.cache_dir, compression_level=config.psl.compression_level)
    path = store.save(data, source_url=args.url)
    print(f"saved {len(rule_set)} rules to {path}")
    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    """Print rule counts of the PSL."""
    stats = _load_extractor(args.psl).rule_set.stats()
    for kind, count in stats.items():
        print(f"{kind:<11}: {count}")
    return 0


COMMANDS = {
    "parse": cmd_parse,
    "fetch": cmd_fetch,
    "stats": cmd_stats,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entrypoint."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        return COMMANDS[args.command](args)
    except (TLDExtractError, FileNotFoundError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
