import json
import math
import logging
from typing import Any, Callable, Dict, List

from src.core.models import FieldValue, ParsedLiteral, RawString

logger = logging.getLogger(__name__)

LineSplitter = Callable[[str], List[str]]


def naive_split(line: str) -> List[str]:
    """Split on every comma. No quoting, escaping or trimming."""
    return line.split(",")


def _reject_constant(name):
    # json.loads accepts NaN/Infinity, which are not JSON literals
    raise ValueError(f"Not a JSON literal: {name}")


def _parse_number(text):
    # Overflowing literals like 1e400 have no JSON representation
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {text}")
    # One number type: 1.0 and 1e2 come out as 1 and 100
    if value.is_integer():
        return int(value)
    return value


def parse_field(raw: str) -> FieldValue:
    """Parse a raw field as a strict JSON literal, falling back to the raw text."""
    try:
        return ParsedLiteral(value=json.loads(raw, parse_float=_parse_number, parse_constant=_reject_constant))
    except ValueError:
        return RawString(text=raw)


def field_to_json(field: FieldValue) -> Any:
    if isinstance(field, ParsedLiteral):
        return field.value
    return field.text


def build_row(headers: List[str], columns: List[str]) -> Dict[str, Any]:
    """
    Map columns onto headers by position.
    Missing columns become None; columns past the last header are dropped.
    """
    row = {}
    for i, header in enumerate(headers):
        row[header] = field_to_json(parse_field(columns[i])) if i < len(columns) else None
    return row


def read_rows(path: str, splitter: LineSplitter = naive_split) -> List[Dict[str, Any]]:
    """Stream a CSV file line by line; the first line holds the headers."""
    headers = None
    rows = []
    with open(path, "r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            line = line.rstrip("\n")
            if headers is None:
                headers = splitter(line)
                continue
            columns = splitter(line)
            if len(columns) != len(headers):
                logger.warning(
                    f"{path}:{line_number} has {len(columns)} fields, expected {len(headers)}"
                )
            rows.append(build_row(headers, columns))
    return rows


def to_json(path: str, splitter: LineSplitter = naive_split) -> str:
    """Convert a CSV file into pretty-printed JSON text."""
    rows = read_rows(path, splitter)
    logger.debug(f"Parsed {len(rows)} rows from {path}")
    return json.dumps(rows, indent=2, ensure_ascii=False, allow_nan=False)
