"""Tab-separated reference table parser."""

from __future__ import annotations

import logging
from typing import Dict, List

logger = logging.getLogger(__name__)


def parse(text: str | None) -> List[Dict[str, str]]:
    """
    Parse a TSV blob into one dict per data row, keyed by header column.

    Rows whose field count differs from the header are dropped. Values stay
    raw strings; numeric interpretation happens when typed records are built.
    """
    if not text:
        return []
    lines = [line.rstrip("\r") for line in text.strip().split("\n")]
    headers = lines[0].split("\t")
    rows: List[Dict[str, str]] = []
    dropped = 0

    for line in lines[1:]:
        fields = line.split("\t")
        if len(fields) != len(headers):
            dropped += 1
            continue
        rows.append(dict(zip(headers, fields)))

    if dropped:
        logger.debug("Dropped %s malformed TSV rows (expected %s columns)", dropped, len(headers))
    return rows
