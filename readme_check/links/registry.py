"""
Module registry error payloads.

Provider pages on the registry answer unknown names with a JSON envelope
``{"errors": [{"code": ..., "message": ...}]}``. The status code is not
reliable, so registry URLs are judged by this payload instead.

Field names match case-insensitively and null values read as empty, so
``null`` and ``{"errors": null}`` decode to an envelope with no errors.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

from readme_check.errors import RegistryResponseError


REGISTRY_PROVIDER_MARKER = "registry.terraform.io/providers/"
NAME_UNKNOWN = "NAME_UNKNOWN"


def _fold_keys(data: Any) -> Any:
    """Lowercase mapping keys and drop null values."""
    if data is None:
        return {}
    if isinstance(data, dict):
        return {
            key.lower(): value
            for key, value in data.items()
            if isinstance(key, str) and value is not None
        }
    return data


class RegistryErrorDetail(BaseModel):
    """One entry of the registry error envelope."""
    code: str = Field("", description="Machine-readable error code")
    message: str = Field("", description="Human-readable error message")

    @model_validator(mode="before")
    @classmethod
    def fold_keys(cls, data: Any) -> Any:
        return _fold_keys(data)


class RegistryErrorResponse(BaseModel):
    """Registry error envelope. An empty ``errors`` list means no error."""
    errors: List[RegistryErrorDetail] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def fold_keys(cls, data: Any) -> Any:
        return _fold_keys(data)

    def find(self, code: str) -> Optional[RegistryErrorDetail]:
        for detail in self.errors:
            if detail.code == code:
                return detail
        return None

    @property
    def name_unknown(self) -> bool:
        return self.find(NAME_UNKNOWN) is not None


def is_registry_url(url: str) -> bool:
    return REGISTRY_PROVIDER_MARKER in url


def decode_registry_response(body: bytes, url: Optional[str] = None) -> RegistryErrorResponse:
    """Decode a registry response body.

    Args:
        body: Raw response body.
        url: URL the body came from, kept on the raised error.

    Returns:
        The decoded error envelope.

    Raises:
        RegistryResponseError: If the body is not a JSON error envelope.
    """
    try:
        return RegistryErrorResponse.model_validate_json(body)
    except ValidationError as e:
        raise RegistryResponseError(
            f"Cannot decode registry response from {url or 'registry'}: "
            f"{e.error_count()} validation error(s)",
            url=url,
            original_error=e,
        ) from e
