"""
Edge registry data models.

These models define the JSON bodies exchanged with the device registry.
Field names are snake_case in Python and camelCase on the wire.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    """Base for registry payloads: immutable, camelCase aliases, unknown fields ignored."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def to_wire(self) -> dict:
        """Dump to the JSON-compatible dict sent to the registry."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# Enums


class AuthType(str, Enum):
    """Discriminant of an authentication mechanism."""

    NONE = "none"
    SAS = "sas"
    SELF_SIGNED = "selfSigned"
    CERTIFICATE_AUTHORITY = "certificateAuthority"


# Authentication payloads


class SymmetricKey(WireModel):
    """Primary/secondary shared access keys. Omitted keys are generated by the server."""

    primary_key: Optional[str] = Field(default=None, alias="primaryKey")
    secondary_key: Optional[str] = Field(default=None, alias="secondaryKey")


class X509Thumbprint(WireModel):
    """Thumbprints of self-signed X.509 certificates."""

    primary_thumbprint: Optional[str] = Field(default=None, alias="primaryThumbprint")
    secondary_thumbprint: Optional[str] = Field(default=None, alias="secondaryThumbprint")


# Authentication mechanisms (tagged by "type")


class SymmetricKeyAuth(WireModel):
    """Shared access signature authentication."""

    type: Literal["sas"] = "sas"
    symmetric_key: Optional[SymmetricKey] = Field(default=None, alias="symmetricKey")


class X509ThumbprintAuth(WireModel):
    """Self-signed certificate authentication."""

    type: Literal["selfSigned"] = "selfSigned"
    x509_thumbprint: Optional[X509Thumbprint] = Field(default=None, alias="x509Thumbprint")


class CertificateAuthorityAuth(WireModel):
    """Authentication with a certificate issued by a registered CA."""

    type: Literal["certificateAuthority"] = "certificateAuthority"


class NoAuth(WireModel):
    """Explicitly no authentication."""

    type: Literal["none"] = "none"


AuthMechanism = Annotated[
    Union[SymmetricKeyAuth, X509ThumbprintAuth, CertificateAuthorityAuth, NoAuth],
    Field(discriminator="type"),
]


# Resources


class Module(WireModel):
    """
    A module identity registered under a device.

    The same type is used for requests and responses. ``generation_id`` and
    ``managed_by`` are assigned by the server and left unset on requests.
    A missing ``authentication`` lets the server choose a default.
    """

    device_id: Optional[str] = Field(default=None, alias="deviceId")
    module_id: Optional[str] = Field(default=None, alias="moduleId")
    generation_id: Optional[str] = Field(default=None, alias="generationId")
    managed_by: Optional[str] = Field(default=None, alias="managedBy")
    authentication: Optional[AuthMechanism] = None


class ErrorResponse(WireModel):
    """Error payload returned by the registry on non-2xx responses."""

    message: str = Field(default="", alias="Message")
