"""Actions domain exceptions."""

from pathviz.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class ImpactOverviewNotFoundError(EntityNotFoundError):
    """Raised when the scenario has no matching impact overview."""

    def __init__(self, overview_id: str | None = None) -> None:
        if overview_id is None:
            message = "Scenario has no impact overview"
        else:
            message = f"Impact overview '{overview_id}' not found"
        super().__init__(
            message=message,
            code=ErrorCode.IMPACT_OVERVIEW_NOT_FOUND,
            details={"overview_id": overview_id},
        )


class InvalidSortKeyError(ValidationError):
    """Raised for an unknown action sort key."""

    def __init__(self, sort_by: str) -> None:
        super().__init__(
            message=f"Unknown sort key '{sort_by}'",
            code=ErrorCode.INVALID_SORT_KEY,
            details={"sort_by": sort_by},
        )
