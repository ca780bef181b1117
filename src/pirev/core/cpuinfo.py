from __future__ import annotations

import re
from pathlib import Path

from pirev.revision.errors import CpuinfoError
from pirev.utils.logger import get_logger

log = get_logger(__name__)

CPUINFO_PATH = Path("/proc/cpuinfo")

_REVISION_RE = re.compile(r"^Revision\s*:\s*(\S+)")


def read_revision(path: Path = CPUINFO_PATH) -> str:
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise CpuinfoError(f"Could not open {path}: {e.strerror or e}") from e

    for ln in text.splitlines():
        m = _REVISION_RE.match(ln)
        if m:
            log.debug("Revision from %s: %s", path, m.group(1))
            return m.group(1)
    raise CpuinfoError(f"No Revision line found in {path}")
