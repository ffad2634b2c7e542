"""Load drift log entries from a JSON file or URL.

Any failure at this boundary yields an empty list so the aggregation
functions never see an exception from I/O or parsing.
"""

import json
from pathlib import Path
from typing import Optional

import httpx
import structlog

from cli.retry import http_retry

from .dates import parse_timestamp
from .models import LogEntry

logger = structlog.get_logger()

DEFAULT_KEY = "resonance_drift_log"


def parse_entry(record: dict) -> LogEntry:
    """Flatten one nested drift log record.

    Raises KeyError/TypeError/ValueError/OverflowError when the record is
    malformed.
    """
    creation = record["creation"]
    field = creation.get("field") or {}
    return LogEntry(
        id=str(record["id"]),
        user_id=str(record["user_id"]),
        created_at=parse_timestamp(record["created_at"]),
        is_final=bool(record.get("final_payload", False)),
        mood_label=str(creation["mood_label"]),
        conflict_intensity=float(creation["conflict_intensity"]),
        field_hz=float(field["hz"]),
        bloom_phase=int(creation["bloom_phase"]),
        constellation=str(record["celestium_mapping"]["constellation"]),
        status_code=str(record["law_portion"]["status"]),
        input_desire=str(creation.get("input_desire", "")),
        field_name=str(field.get("name", "")),
        bloom_petal=str(creation.get("bloom_petal", "")),
    )


def parse_document(data, key: str = DEFAULT_KEY) -> list[LogEntry]:
    """Extract entries from a decoded JSON document, skipping bad records."""
    records = data.get(key) if isinstance(data, dict) else None
    if not isinstance(records, list):
        logger.warning("drift_log_key_missing", key=key)
        return []

    entries = []
    for position, record in enumerate(records):
        try:
            entries.append(parse_entry(record))
        except (KeyError, TypeError, ValueError, AttributeError, OverflowError) as e:
            logger.warning("drift_log_record_skipped", position=position, error=str(e))
    return entries


def load_from_file(path: Path, key: str = DEFAULT_KEY) -> list[LogEntry]:
    path = Path(path).expanduser()
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("drift_log_load_failed", path=str(path), error=str(e))
        return []

    entries = parse_document(data, key)
    logger.info("drift_log_loaded", path=str(path), entries=len(entries))
    return entries


def load_from_url(
    url: str,
    key: str = DEFAULT_KEY,
    timeout: float = 10.0,
    max_attempts: int = 3,
    min_wait: float = 2.0,
    max_wait: float = 10.0,
) -> list[LogEntry]:
    @http_retry(
        max_attempts=max_attempts,
        min_wait=min_wait,
        max_wait=max_wait,
        exceptions=(httpx.ConnectError, httpx.TimeoutException),
    )
    def _fetch():
        with httpx.Client(timeout=timeout) as client:
            response = client.get(url)
            response.raise_for_status()
            return response.json()

    try:
        data = _fetch()
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("drift_log_load_failed", url=url, error=str(e))
        return []

    entries = parse_document(data, key)
    logger.info("drift_log_loaded", url=url, entries=len(entries))
    return entries


def load_entries(
    path: Optional[Path] = None,
    url: Optional[str] = None,
    key: str = DEFAULT_KEY,
    **http_options,
) -> list[LogEntry]:
    """Load from url when given, else from path. Never raises."""
    if url:
        return load_from_url(url, key=key, **http_options)
    if path:
        return load_from_file(path, key=key)
    logger.warning("drift_log_no_source")
    return []
