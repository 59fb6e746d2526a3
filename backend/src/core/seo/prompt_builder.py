"""
Prompt construction for SEO descriptions.

A single user prompt covers every domain in the batch. The wording asks
for a flat JSON object keyed by domain so the response can be merged
back into the uploaded rows.
"""

from typing import List

SEO_PROMPT_TEMPLATE = (
    "Generate one concise SEO description (1-2 sentences) for each domain below. "
    "Return as JSON key-value pairs: {domains}"
)


def build_seo_prompt(domains: List[str]) -> str:
    """
    Build the user prompt for a batch of domains.

    Parameters
    ----------
    domains : list of str
        Domains in row order. Duplicates are kept as given.

    Returns
    -------
    str
        Prompt text with the domains joined by ", "
    """
    return SEO_PROMPT_TEMPLATE.format(domains=", ".join(domains))


def build_messages(prompt: str) -> List[dict]:
    """Chat payload with the prompt as the only user-role message."""
    return [{"role": "user", "content": prompt}]
