#!/usr/bin/env python3
"""Print toggle key states parsed from ``xset q`` output.

Usage
-----
Pipe the report in, or point at a saved copy::

    xset q | python scripts/query_keys.py
    python scripts/query_keys.py --file xset.txt --key "Caps Lock"

Options::

    --file FILE      Read the report from FILE instead of stdin
    --key NAME       Only print the key called NAME (exit 1 if missing)
    --json           Output as machine-readable JSON
    --verbose, -v    Enable debug logging

``XKEYS_REPORT_PATH``, ``XKEYS_ENCODING`` and ``XKEYS_TRACE_ENABLED`` are
honoured as well.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyxkeys import KeyStatus, XkeysClient, XkeysConfig  # noqa: E402


def _format_status(status: KeyStatus) -> str:
    return f"  {status.id:>3}  {status.name:<20} {status.state.value}"


async def main() -> int:
    parser = argparse.ArgumentParser(description="Print toggle key states from xset q output")
    parser.add_argument("--file", dest="report_path", help="Read the report from FILE instead of stdin")
    parser.add_argument("--key", help="Only print this key")
    parser.add_argument("--json", dest="json_mode", action="store_true", help="Output as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    overrides = {"report_path": args.report_path} if args.report_path else {}
    config = XkeysConfig.from_env(**overrides)

    async with XkeysClient(config=config) as client:
        if args.key:
            status = await client.query(args.key)
            if status is None:
                print(f"No key named {args.key!r}", file=sys.stderr)
                return 1
            statuses = [status]
        else:
            statuses = list((await client.query_all()).values())

    if args.json_mode:
        print(json.dumps([s.model_dump(mode="json") for s in statuses], indent=2, ensure_ascii=False))
    else:
        for status in statuses:
            print(_format_status(status))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
