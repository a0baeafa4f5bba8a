"""Metrics domain exceptions."""

from pathviz.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidYearRangeError(ValidationError):
    """Raised when a year window ends before it starts."""

    def __init__(self, start_year: int, end_year: int) -> None:
        super().__init__(
            message=f"Invalid year range: {start_year} is after {end_year}",
            code=ErrorCode.INVALID_YEAR_RANGE,
            details={"start_year": start_year, "end_year": end_year},
        )


class MetricNotFoundError(EntityNotFoundError):
    """Raised when no metric exists for a node."""

    def __init__(self, node_id: str) -> None:
        super().__init__(
            message=f"Metric for node '{node_id}' not found",
            code=ErrorCode.METRIC_NOT_FOUND,
            details={"node_id": node_id},
        )
