"""
Link extraction and verification for README documents.
"""

from readme_check.links.extractor import extract_urls, iter_urls
from readme_check.links.registry import (
    RegistryErrorDetail,
    RegistryErrorResponse,
    decode_registry_response,
    is_registry_url,
)
from readme_check.links.verifier import LinkResult, LinkVerifier

__all__ = [
    "extract_urls",
    "iter_urls",
    "RegistryErrorDetail",
    "RegistryErrorResponse",
    "decode_registry_response",
    "is_registry_url",
    "LinkResult",
    "LinkVerifier",
]
