"""Network as Code REST API client package.

Provides lightweight HTTP clients for the Network as Code microservices
that return raw, validated API response types with minimal processing.
Mapping to domain objects is handled by the models package.

Exports:
    APIClient: Bundle of service clients sharing one API key.
    ServiceClient: HTTP client for a single microservice.
    types: Module containing Pydantic models for API responses.
    DEFAULT_TIMEOUT: Default HTTP request timeout.
"""

from . import types
from .client import APIClient, service_endpoint
from .service import DEFAULT_TIMEOUT, ServiceClient, ServiceEndpoint

__all__ = [
    "DEFAULT_TIMEOUT",
    "APIClient",
    "ServiceClient",
    "ServiceEndpoint",
    "service_endpoint",
    "types",
]
