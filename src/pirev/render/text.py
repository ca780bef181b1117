from __future__ import annotations

from pirev.revision.decoder import DecodedResult


def render_text(res: DecodedResult) -> str:
    rows: list[tuple[str, str]] = [("Style", "New" if res.new_style else "Old")]
    if res.new_style:
        rows += [
            ("Overvoltage", res.overvoltage or ""),
            ("OTP Programming", res.otp_programming or ""),
            ("OTP Reading", res.otp_reading or ""),
            ("Warranty", res.warranty or ""),
        ]
    rows += [
        ("Type/Model", res.type),
        ("Revision", res.revision),
    ]
    if res.new_style:
        rows.append(("Processor/SOC", res.processor or ""))
    rows += [
        ("Memory", res.memory),
        ("Manufacturer", res.manufacturer),
    ]

    lines = [f"Revision code 0x{res.raw_code:X} interpreted:"]
    lines += [f"    {label:<16}: {value}" for label, value in rows]
    return "\n".join(lines)
