from __future__ import annotations

import json
import logging
import threading
import time
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any

from careercraft.core.config import settings
from careercraft.history.storage import KeyValueStore, SqliteKeyValueStore
from careercraft.schemas.history import HistoryEventType, HistoryRecord

logger = logging.getLogger(__name__)

HISTORY_KEY = "ccai:history"

# Read-modify-write of the slot is only serialised within this process.
_write_lock = threading.Lock()


@lru_cache(maxsize=1)
def get_storage() -> KeyValueStore:
    return SqliteKeyValueStore(settings.history_db_path)


def _utc_now_iso() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def get_history(storage: KeyValueStore | None = None) -> list[HistoryRecord]:
    store = storage or get_storage()
    raw = store.get_item(HISTORY_KEY)
    if not raw:
        return []
    try:
        items = json.loads(raw)
        return [HistoryRecord.model_validate(item) for item in items]
    except (ValueError, TypeError) as exc:
        logger.warning("history_unreadable key=%s: %s", HISTORY_KEY, exc)
        return []


def log_history(
    entry_type: HistoryEventType,
    meta: dict[str, Any] | None = None,
    *,
    storage: KeyValueStore | None = None,
) -> HistoryRecord:
    store = storage or get_storage()
    record = HistoryRecord(
        id=f"{entry_type}-{int(time.time() * 1000)}",
        type=entry_type,
        at=_utc_now_iso(),
        meta=meta,
    )
    with _write_lock:
        existing = get_history(store)
        payload = [record.model_dump(exclude_none=True)]
        payload.extend(item.model_dump(exclude_none=True) for item in existing)
        store.set_item(HISTORY_KEY, json.dumps(payload, ensure_ascii=False))
    return record


def clear_history(storage: KeyValueStore | None = None) -> None:
    store = storage or get_storage()
    store.remove_item(HISTORY_KEY)
