from __future__ import annotations


def dest_hint(v: str, keep: int = 4) -> str:
    # Phone numbers never hit the logs in full.
    v = (v or "").strip()
    if not v:
        return ""
    if len(v) <= keep:
        return v
    return f"...{v[-keep:]}"


def recipients_hint(recipients: str, keep: int = 4) -> str:
    return ",".join(dest_hint(r, keep) for r in (recipients or "").split(",") if r.strip())
