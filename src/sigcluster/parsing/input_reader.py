"""Turn a cluster input stream into aggregated signature records.

The first non-blank line decides the mode: a JSON object switches the
reader to JSONL, anything else to plain text where each line is its own
signature. Records come back in first-seen order.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from pathlib import Path

from .._util import stringify
from ..clustering.types import SignatureRecord
from ..errors import InputFormatError

logger = logging.getLogger(__name__)

DEFAULT_FIELD = "sig"
DEFAULT_TIME_FIELD = "ts"
RAW_FIELD = "raw"


@dataclass
class _SigAgg:
    record: SignatureRecord

    def observe(self, ts: str) -> None:
        r = self.record
        first_ts = r.first_ts
        last_ts = r.last_ts
        if ts and (not first_ts or ts < first_ts):
            first_ts = ts
        if ts and (not last_ts or ts > last_ts):
            last_ts = ts
        self.record = replace(r, count=r.count + 1, first_ts=first_ts, last_ts=last_ts)


def read_cluster_input(
    lines: Iterable[str],
    field: str = DEFAULT_FIELD,
    time_field: str = DEFAULT_TIME_FIELD,
) -> list[SignatureRecord]:
    sigs: dict[str, _SigAgg] = {}
    mode: str | None = None
    line_no = 0

    for line in lines:
        line_no += 1
        stripped = line.strip()
        if not stripped:
            continue

        if mode is None:
            mode = "jsonl" if _parse_json_object(stripped) is not None else "text"
            logger.info("Cluster input detected as %s", mode)

        if mode == "text":
            entry = sigs.get(stripped)
            if entry is None:
                entry = sigs[stripped] = _SigAgg(
                    SignatureRecord(sig=stripped, count=0, sample=stripped)
                )
            entry.observe("")
            continue

        obj = _parse_json_object(stripped)
        if obj is None:
            raise InputFormatError(line_no, "invalid json")
        _add_json_record(sigs, obj, field, time_field, line_no)

    records = [entry.record for entry in sigs.values()]
    logger.info(
        "Read %d input lines into %d distinct signatures", line_no, len(records)
    )
    return records


def read_cluster_file(
    path: str | Path,
    field: str = DEFAULT_FIELD,
    time_field: str = DEFAULT_TIME_FIELD,
) -> list[SignatureRecord]:
    with Path(path).open("r", encoding="utf-8", errors="replace") as handle:
        return read_cluster_input(handle, field=field, time_field=time_field)


def _parse_json_object(line: str) -> dict[str, object] | None:
    try:
        loaded = json.loads(line)
    except json.JSONDecodeError:
        return None
    return loaded if isinstance(loaded, dict) else None


def _add_json_record(
    sigs: dict[str, _SigAgg],
    obj: dict[str, object],
    field: str,
    time_field: str,
    line_no: int,
) -> None:
    if field not in obj:
        raise InputFormatError(line_no, f"missing field '{field}'")
    sig = stringify(obj[field])
    raw = stringify(obj[RAW_FIELD]) if RAW_FIELD in obj else ""
    ts = stringify(obj[time_field]) if time_field and time_field in obj else ""

    entry = sigs.get(sig)
    if entry is None:
        entry = sigs[sig] = _SigAgg(
            SignatureRecord(sig=sig, count=0, sample=raw, sample_ts=ts)
        )
    entry.observe(ts)
