import json
import os
import logging
from typing import Any, Dict, List

logger = logging.getLogger(__name__)


def choose_data_path(data_dir: str, stem: str) -> str:
    """Pick `<stem>.json`, falling back to `<stem>.jsonl` when only that exists."""
    candidates = [
        os.path.join(data_dir, f"{stem}.json"),
        os.path.join(data_dir, f"{stem}.jsonl"),
    ]
    for p in candidates:
        if os.path.exists(p):
            return p
    return candidates[0]  # default (fails in load_records with a clear log)


def load_records(path: str) -> List[Dict[str, Any]]:
    """Read raw records from a JSON array file or a JSONL file.

    Raises:
        FileNotFoundError: If `path` does not exist.
        json.JSONDecodeError: If a `.json` file is not valid JSON.
    """
    if not os.path.exists(path):
        logger.error(f"❌ Data file not found at {path}")
        raise FileNotFoundError(f"Data file not found: {path}")

    if path.endswith(".jsonl"):
        return _load_jsonl(path)

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    # {"characters": [...]} style dumps
    if isinstance(data, dict):
        lists = [v for v in data.values() if isinstance(v, list)]
        if len(lists) != 1:
            logger.warning(f"⚠️ {path} holds {len(lists)} lists, expected exactly one; loading no records")
            return []
        data = lists[0]

    if not isinstance(data, list):
        logger.warning(f"⚠️ {path} does not hold a list of records")
        return []
    records = [r for r in data if isinstance(r, dict)]
    dropped = len(data) - len(records)
    if dropped:
        logger.warning(f"⚠️ Dropped {dropped} non-object entries in {path}")
    return records


def _load_jsonl(path: str) -> List[Dict[str, Any]]:
    records: List[Dict[str, Any]] = []
    skipped = 0
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                rec = json.loads(line)
            except json.JSONDecodeError:
                skipped += 1
                continue
            if isinstance(rec, dict):
                records.append(rec)
    if skipped:
        logger.warning(f"⚠️ Skipped {skipped} malformed lines in {path}")
    return records
