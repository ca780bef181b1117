from __future__ import annotations

import json
from typing import Any

from pirev.revision.decoder import DecodedResult


def to_dict(res: DecodedResult) -> dict[str, Any]:
    # key order is part of the output format
    d: dict[str, Any] = {
        "revision_code": f"0x{res.raw_code:X}",
        "style": res.style,
    }
    if res.new_style:
        d["overvoltage_allowed"] = res.overvoltage_allowed
        d["otp_programming_allowed"] = res.otp_programming_allowed
        d["otp_reading_allowed"] = res.otp_reading_allowed
        d["warranty_intact"] = res.warranty_intact
    d["type"] = res.type
    d["revision"] = res.revision
    if res.new_style:
        d["processor"] = res.processor
    d["memory"] = res.memory
    d["manufacturer"] = res.manufacturer
    return d


def render_json(res: DecodedResult) -> str:
    return json.dumps(to_dict(res), indent=4)
