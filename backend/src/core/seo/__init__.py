"""
SEO module - domain extraction, prompt building, completion and
output validation for SEO description generation.
"""

from .domains import extract_domain, domains_for_rows
from .errors import (
    SEOGenerationError,
    ConfigurationError,
    NoRowsProvided,
    GenerationFailed,
    InvalidProviderOutput,
)
from .output_validator import parse_description_mapping
from .prompt_builder import build_seo_prompt, build_messages, SEO_PROMPT_TEMPLATE

__all__ = [
    'extract_domain',
    'domains_for_rows',
    'SEOGenerationError',
    'ConfigurationError',
    'NoRowsProvided',
    'GenerationFailed',
    'InvalidProviderOutput',
    'parse_description_mapping',
    'build_seo_prompt',
    'build_messages',
    'SEO_PROMPT_TEMPLATE',
]
