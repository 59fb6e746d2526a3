"""
Output validation for provider responses.

The completion text is expected to be a JSON object mapping each domain
to a description string. Anything else is rejected before it can reach
the merge step on the client.
"""

import json
from typing import Any, Dict

from .errors import InvalidProviderOutput

EMPTY_COMPLETION = "{}"


def parse_description_mapping(content: Any) -> Dict[str, str]:
    """
    Parse and validate completion text as a Description Mapping.

    Parameters
    ----------
    content : str or None
        Raw text of the first completion choice. None or empty text is
        treated as an empty JSON object.

    Returns
    -------
    Dict[str, str]
        Domain -> description

    Raises
    ------
    InvalidProviderOutput
        If the text is not JSON, not an object, or has non-string values
    """
    text = content or EMPTY_COMPLETION
    try:
        parsed = json.loads(text)
    except (TypeError, ValueError) as e:
        raise InvalidProviderOutput(f"Completion is not valid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise InvalidProviderOutput(
            f"Completion JSON must be an object, got {type(parsed).__name__}"
        )

    bad_keys = [key for key, value in parsed.items() if not isinstance(value, str)]
    if bad_keys:
        raise InvalidProviderOutput(
            f"Completion values must be strings; offending keys: {', '.join(bad_keys)}"
        )

    return parsed
