"""
Analysis error handling utilities.

Provides a decorator mapping domain exceptions to HTTPExceptions so every
analysis endpoint reports errors the same way.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from inverselens.core.exceptions import (
    AnalysisError,
    PersistenceError,
    ValidationError,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

INTERNAL_ERROR_MESSAGE = "Internal server error"


def handle_analysis_errors(func: F) -> F:
    """
    Decorator to handle analysis-related errors and transform them into HTTPExceptions.

    - ValidationError -> 400, logged as a warning
    - AnalysisError, PersistenceError -> 500 with the exception's user-safe message,
      logged with full detail
    - Anything else -> 500 with a generic message
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except ValidationError as e:
            logger.warning(
                "Upload validation failed",
                extra={"endpoint": func.__name__, "details": e.details},
            )
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except (AnalysisError, PersistenceError) as e:
            logger.exception(
                f"{type(e).__name__} in {func.__name__}: {e}",
                extra={"endpoint": func.__name__, "details": e.details},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message
            )

        except Exception as e:
            logger.exception(
                f"Unexpected error in {func.__name__}",
                extra={"endpoint": func.__name__, "error_type": type(e).__name__},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=INTERNAL_ERROR_MESSAGE,
            )

    return wrapper  # type: ignore
