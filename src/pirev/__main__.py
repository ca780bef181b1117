from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from pirev.app import run_app
from pirev.core.cpuinfo import CPUINFO_PATH
from pirev.utils.logger import LEVELS


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="pirev", description="Interpret Raspberry Pi hardware revision codes")
    p.add_argument("codes", nargs="*", metavar="code", help="Revision code in hex, with or without 0x (default: read from cpuinfo)")
    p.add_argument("-j", "--json", action="store_true", help="Emit JSON instead of text")
    p.add_argument("--cpuinfo", type=Path, default=CPUINFO_PATH, help=f"File to read the revision from when no codes are given (default: {CPUINFO_PATH})")
    p.add_argument("--keep-going", action="store_true", help="Report bad codes and continue with the rest instead of stopping")
    p.add_argument("--list-legacy", action="store_true", help="Decode every known old style revision code and exit")

    # Logging
    p.add_argument("--log-level", default="WARNING", choices=LEVELS)
    p.add_argument("--quiet", action="store_true", help="Plain log messages without level/name prefix")

    args = p.parse_args(argv)

    return run_app(
        codes=args.codes,
        as_json=args.json,
        cpuinfo_path=args.cpuinfo,
        keep_going=args.keep_going,
        list_legacy=args.list_legacy,
        log_level=args.log_level,
        quiet=args.quiet,
    )


if __name__ == "__main__":
    sys.exit(main())
