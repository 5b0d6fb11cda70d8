from __future__ import annotations
import csv
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Hashable, Iterable, List

from .config import DATA_SUFFIXES, EXCLUDE_DIRS
from .errors import InvalidInput
from .records import keyed_records

log = logging.getLogger(__name__)


def iter_data_files(roots: Iterable[str]) -> Iterable[str]:
    """Yield record files: explicit file paths as given, directories walked recursively."""
    for root in roots:
        if os.path.isfile(root):
            yield root
            continue
        if not os.path.isdir(root):
            raise InvalidInput(f"no such file or folder: {root}")
        for dirpath, dirnames, filenames in os.walk(os.path.abspath(root)):
            dirnames[:] = sorted(d for d in dirnames if d not in EXCLUDE_DIRS)
            for fn in sorted(filenames):
                if fn.lower().endswith(DATA_SUFFIXES):
                    yield os.path.join(dirpath, fn)


def _load_json(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidInput(f"{path}: invalid JSON ({e})") from e
    except UnicodeDecodeError as e:
        raise InvalidInput(f"{path}: not UTF-8 text ({e})") from e


def _load_jsonl(path: Path) -> List[Any]:
    rows: List[Any] = []
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line_no, line in enumerate(f, 1):
                if not line.strip():
                    continue
                try:
                    rows.append(json.loads(line))
                except json.JSONDecodeError as e:
                    raise InvalidInput(f"{path}:{line_no}: invalid JSON ({e})") from e
    except UnicodeDecodeError as e:
        raise InvalidInput(f"{path}: not UTF-8 text ({e})") from e
    return rows


def _load_csv(path: Path) -> List[Dict[str, str]]:
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            return list(csv.DictReader(f))
    except UnicodeDecodeError as e:
        raise InvalidInput(f"{path}: not UTF-8 text ({e})") from e
    except csv.Error as e:
        raise InvalidInput(f"{path}: invalid CSV ({e})") from e


def load_records(path: str) -> Dict[Hashable, Any]:
    """
    Read one record file into {key: record}.
      .json          -> list of objects (keys = positions) or object of id -> object
      .jsonl/.ndjson -> one object per non-blank line (keys = positions)
      .csv           -> header row + one dict per row (keys = positions)
    """
    p = Path(path)
    suffix = p.suffix.lower()
    if suffix == ".json":
        data = _load_json(p)
    elif suffix in (".jsonl", ".ndjson"):
        data = _load_jsonl(p)
    elif suffix == ".csv":
        data = _load_csv(p)
    else:
        raise InvalidInput(f"{path}: unsupported record file (expected one of {', '.join(DATA_SUFFIXES)})")

    try:
        records = keyed_records(data)
    except InvalidInput as e:
        raise InvalidInput(f"{path}: {e}") from e
    log.info("loaded %d records from %s", len(records), path)
    return records
