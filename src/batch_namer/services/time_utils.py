from __future__ import annotations

from datetime import datetime, timezone


def now_epoch_ms() -> int:
    return int(datetime.now(timezone.utc).timestamp() * 1000)


def archive_filename(prefix: str, epoch_ms: int | None = None) -> str:
    stamp = epoch_ms if epoch_ms is not None else now_epoch_ms()
    return f"{prefix}_{stamp}.zip"
