from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Optional, Sequence, TextIO

from pirev.core.cpuinfo import CPUINFO_PATH, read_revision
from pirev.render.json_out import render_json
from pirev.render.text import render_text
from pirev.revision.decoder import DecodedResult, decode, decode_str
from pirev.revision.errors import CpuinfoError, RevisionError
from pirev.revision.legacy import valid_legacy_codes
from pirev.utils.logger import get_logger, setup_logging

log = get_logger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def run_app(
    codes: Sequence[str],
    as_json: bool = False,
    cpuinfo_path: Path = CPUINFO_PATH,
    keep_going: bool = False,
    list_legacy: bool = False,
    log_level: str = "WARNING",
    quiet: bool = False,
    out: Optional[TextIO] = None,
) -> int:
    setup_logging(level=log_level, quiet=quiet)
    out = out or sys.stdout
    render: Callable[[DecodedResult], str] = render_json if as_json else render_text

    if list_legacy:
        for legacy in valid_legacy_codes():
            print(render(decode(legacy)), file=out)
        return EXIT_SUCCESS

    if not codes:
        try:
            codes = [read_revision(cpuinfo_path)]
        except CpuinfoError as e:
            log.error("%s", e)
            return EXIT_FAILURE

    status = EXIT_SUCCESS
    for text in codes:
        try:
            res = decode_str(text)
        except RevisionError as e:
            log.error("%s", e)
            status = EXIT_FAILURE
            if not keep_going:
                break
            continue
        print(render(res), file=out)
    return status
