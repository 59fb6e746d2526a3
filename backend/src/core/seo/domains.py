"""Domain extraction from contact rows."""

from typing import Any, Dict, Iterable, List, Optional


def extract_domain(email: Any) -> Optional[str]:
    """
    Return everything after the first '@' of an email value.

    Values that are not strings, contain no '@', or have nothing after it
    yield None.

    The frontend merges descriptions back with its own copy of this rule in
    frontend/helpers/csv_rows.py:extract_domain. Keep the two in sync.

    Examples
    --------
    >>> extract_domain("jane@example.com")
    'example.com'
    >>> extract_domain("a@b@example.com")
    'b@example.com'
    >>> extract_domain("no-at-sign") is None
    True
    """
    if not isinstance(email, str) or "@" not in email:
        return None
    domain = email.strip().split("@", 1)[1].strip()
    return domain or None


def domains_for_rows(rows: Iterable[Dict[str, Any]]) -> List[str]:
    """One domain per row, in row order, skipping rows without one."""
    domains = []
    for row in rows:
        if not isinstance(row, dict):
            continue
        domain = extract_domain(row.get("email"))
        if domain is not None:
            domains.append(domain)
    return domains
