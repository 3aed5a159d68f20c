"""
Models Module - Black Box Interface

Purpose: Typed shapes of registry request and response bodies
Interface: Module, AuthMechanism variants, ErrorResponse
Hidden: JSON field naming, discriminator handling
"""

from .models import (
    AuthMechanism,
    AuthType,
    CertificateAuthorityAuth,
    ErrorResponse,
    Module,
    NoAuth,
    SymmetricKey,
    SymmetricKeyAuth,
    WireModel,
    X509Thumbprint,
    X509ThumbprintAuth,
)

__all__ = [
    "AuthMechanism",
    "AuthType",
    "CertificateAuthorityAuth",
    "ErrorResponse",
    "Module",
    "NoAuth",
    "SymmetricKey",
    "SymmetricKeyAuth",
    "WireModel",
    "X509Thumbprint",
    "X509ThumbprintAuth",
]
