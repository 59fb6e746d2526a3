# frontend/helpers/csv_rows.py
"""
CSV row helpers for the SEO flow.
Decodes and parses uploaded CSV text into ordered rows, finds rows missing an
SEO description, merges generated descriptions back by email domain and
serializes the result for download.
"""
import io
from typing import Any, Dict, List, Optional, Sequence, Tuple

import chardet
import pandas as pd

import frontend_config as config
from helpers.flow_errors import EmptyOrMalformedCSV

Row = Dict[str, Any]


def decode_csv_bytes(raw: bytes) -> str:
    """Decode uploaded bytes as UTF-8 (BOM stripped), falling back to chardet."""
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        pass

    encoding = chardet.detect(raw).get("encoding")
    if not encoding:
        raise EmptyOrMalformedCSV("Could not detect file encoding")
    try:
        return raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise EmptyOrMalformedCSV(f"Could not decode file as {encoding}") from e


def parse_csv_text(text: str) -> Tuple[List[str], List[Row]]:
    """
    Parse comma-delimited text with a header row.

    All values are kept as strings, empty cells stay empty strings and blank
    lines are skipped.

    Returns:
        (columns, rows) in file order

    Raises:
        EmptyOrMalformedCSV: no data rows, or pandas cannot parse the text
    """
    try:
        df = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            # Trailing delimiters must not turn the first column into the index
            index_col=False,
        )
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise EmptyOrMalformedCSV(str(e)) from e

    if df.empty:
        raise EmptyOrMalformedCSV("CSV has no data rows")

    columns = [str(c) for c in df.columns]
    df.columns = columns
    # Short lines leave NaN in the trailing cells
    df = df.fillna("")
    return columns, df.to_dict(orient="records")


def rows_to_csv(rows: Sequence[Row], columns: Sequence[str]) -> str:
    """Serialize rows with the original column order; new keys are appended."""
    ordered = list(columns)
    for row in rows:
        for key in row:
            if key not in ordered:
                ordered.append(key)
    df = pd.DataFrame(list(rows), columns=ordered)
    return df.to_csv(index=False, lineterminator="\n")


def extract_domain(email: Any) -> Optional[str]:
    """
    Everything after the first '@'; None when there is no usable domain.

    Mirrors backend/src/core/seo/domains.py:extract_domain, which decides the
    keys of the returned mapping. Keep the two in sync.
    """
    if not isinstance(email, str) or "@" not in email:
        return None
    domain = email.strip().split("@", 1)[1].strip()
    return domain or None


def needs_seo(row: Row) -> bool:
    seo = row.get(config.SEO_COLUMN)
    return not isinstance(seo, str) or seo.strip() == ""


def rows_missing_seo(rows: Sequence[Row]) -> List[Row]:
    """Rows whose seo field is absent or blank, in original order."""
    return [row for row in rows if needs_seo(row)]


def merge_descriptions(rows: Sequence[Row], descriptions: Dict[str, str]) -> List[Row]:
    """
    Return a copy of ``rows`` with blank seo values filled from ``descriptions``.

    Only rows that are missing a description are filled; rows that already
    have one, or whose domain has no (non-empty) entry, keep their value.
    """
    merged = []
    for row in rows:
        updated = dict(row)
        if not needs_seo(row):
            merged.append(updated)
            continue
        domain = extract_domain(row.get(config.EMAIL_COLUMN))
        description = descriptions.get(domain) if domain is not None else None
        if isinstance(description, str) and description:
            updated[config.SEO_COLUMN] = description
        merged.append(updated)
    return merged


def preview_slice(rows: Sequence[Row], limit: int = config.PREVIEW_ROWS) -> List[Row]:
    return list(rows[:limit])
