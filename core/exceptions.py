"""Custom exception classes for the application.

`AppException` subclasses are rendered as JSON error responses by the
handlers in `core.error_handlers`. `GenerationError` is internal: it marks
a failed text-generation call and is always absorbed by the service that
made the call.
"""

from typing import Optional, Any, Dict


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error details.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Exception raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: Any):
        """Initialize not found error.

        Args:
            resource: Type of resource (e.g., 'User', 'DailyMealPlan').
            identifier: ID or key that was not found.
        """
        message = f"{resource} with id '{identifier}' not found"
        super().__init__(message, status_code=404, details={"resource": resource, "id": identifier})


class ProfileRequiredError(AppException):
    """Raised when an operation needs a completed health profile."""

    def __init__(self, user_id: Any):
        super().__init__(
            "Complete onboarding first to get personalized meal plans",
            status_code=400,
            details={"user_id": user_id, "onboarding_endpoint": f"/api/users/{user_id}/profile"},
        )


class MealPlanNotFoundError(AppException):
    """Raised when feedback is submitted for a date that has no meal plan."""

    def __init__(self, user_id: Any, plan_date: Any):
        super().__init__(
            "No meal plan found for this date",
            status_code=404,
            details={"user_id": user_id, "date": str(plan_date)},
        )


class DatabaseError(AppException):
    """Exception raised when database operations fail."""

    def __init__(self, message: str, operation: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        merged = dict(details or {})
        if operation:
            merged["operation"] = operation
        super().__init__(message, status_code=500, details=merged)


class GenerationError(Exception):
    """A text-generation call failed: transport, timeout, empty or invalid output."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)
