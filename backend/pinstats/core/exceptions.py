"""
Service layer custom exceptions.

This module defines the error taxonomy shared by the gateways, the services
and the HTTP layer. Routers translate these into status codes; the dashboard
merger contains ``UpstreamError`` locally instead of failing the request.
"""

from typing import Any, Dict, Optional

from .enums import Provider


class ServiceException(Exception):
    """Base exception for all service layer errors."""

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.service = service
        self.operation = operation
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        if self.service and self.operation:
            return f"[{self.service}.{self.operation}] {self.message}"
        return self.message


class ValidationError(ServiceException):
    """Exception raised for malformed or missing request identifiers."""

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        validation_context = context or {}
        if field:
            validation_context["field"] = field
        if value is not None:
            validation_context["value"] = str(value)

        super().__init__(
            message=message,
            service=service,
            operation=operation,
            context=validation_context,
        )
        self.field = field


class UpstreamError(ServiceException):
    """A named provider fetch failed (transport, status or payload)."""

    def __init__(
        self,
        provider: Provider,
        cause: BaseException,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        status_code = getattr(cause, "status_code", None)
        upstream_context = context or {}
        upstream_context["provider"] = provider.value
        if status_code:
            upstream_context["status_code"] = status_code

        super().__init__(
            message=f"{provider.display_name} request failed: {cause}",
            service=f"{provider.display_name}Gateway",
            operation=operation,
            context=upstream_context,
            original_error=cause,
        )
        self.provider = provider
        self.cause = cause
        self.status_code: Optional[int] = status_code

    def __str__(self) -> str:
        return self.message


class RateLimitError(ServiceException):
    """Per-client request budget exceeded."""

    def __init__(
        self,
        message: str = "Rate limit exceeded. Please try again later.",
        retry_after: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.retry_after = retry_after


class ConfigurationError(ServiceException):
    """A required credential or setting is missing."""

    pass
