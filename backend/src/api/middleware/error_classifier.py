"""Map pipeline failures onto the API error taxonomy."""

import logging
import traceback
from typing import Iterator, Optional, Tuple, Type

from google.api_core import exceptions as google_exceptions
from google.generativeai.types import BlockedPromptException, StopCandidateException

from backend.src.exceptions import (
    APIError,
    AuthenticationError,
    QuotaExceededError,
    SafetyBlockError,
    ServiceError,
)

logger = logging.getLogger(__name__)

AUTH_EXCEPTIONS: Tuple[Type[BaseException], ...] = (
    google_exceptions.Unauthenticated,
    google_exceptions.PermissionDenied,
)
SAFETY_EXCEPTIONS: Tuple[Type[BaseException], ...] = (
    BlockedPromptException,
    StopCandidateException,
)
QUOTA_EXCEPTIONS: Tuple[Type[BaseException], ...] = (
    google_exceptions.ResourceExhausted,
    google_exceptions.TooManyRequests,
)

AUTH_MARKERS: Tuple[str, ...] = ("API key", "API_KEY", "UNAUTHENTICATED")
SAFETY_MARKERS: Tuple[str, ...] = ("SAFETY",)
QUOTA_MARKERS: Tuple[str, ...] = ("QUOTA", "RESOURCE_EXHAUSTED")


def _error_chain(error: BaseException) -> Iterator[BaseException]:
    """Yield the error and every exception it was raised from."""
    seen = set()
    current: Optional[BaseException] = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def _matches(
    error: BaseException,
    exception_types: Tuple[Type[BaseException], ...],
    markers: Tuple[str, ...],
) -> bool:
    for item in _error_chain(error):
        if isinstance(item, exception_types):
            return True
        message = str(item)
        if any(marker in message for marker in markers):
            return True
    return False


def classify_error(error: Exception, debug: bool = False) -> APIError:
    """Turn any failure raised while processing a request into an APIError.

    Errors that already belong to the taxonomy are returned unchanged. Model
    errors are classified by SDK exception type first and by well-known
    markers in their messages second, walking the whole cause chain.

    Args:
        error: The failure to classify
        debug: Whether to attach the traceback to unclassified errors

    Returns:
        APIError to report to the client
    """
    if isinstance(error, APIError):
        return error

    if _matches(error, AUTH_EXCEPTIONS, AUTH_MARKERS):
        return AuthenticationError()
    if _matches(error, SAFETY_EXCEPTIONS, SAFETY_MARKERS):
        return SafetyBlockError()
    if _matches(error, QUOTA_EXCEPTIONS, QUOTA_MARKERS):
        return QuotaExceededError()

    details = None
    if debug:
        details = "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )
    return ServiceError(message=str(error) or ServiceError.default_message, details=details)
