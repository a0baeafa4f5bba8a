"""Flows domain exceptions."""

from typing import Any

from pathviz.domain.shared.exceptions import (
    BusinessRuleViolation,
    DataContractError,
    EntityNotFoundError,
    ErrorCode,
)


class MalformedFlowLinkError(DataContractError):
    """Raised when flow link arrays are inconsistent or reference unknown nodes."""

    def __init__(
        self,
        message: str,
        *,
        year: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.MALFORMED_FLOW_LINK,
            details={"year": year, **(details or {})},
        )


class EmptyFlowError(BusinessRuleViolation):
    """Raised when a flow has no links to build a frame from."""

    def __init__(self, flow_id: str) -> None:
        super().__init__(
            message=f"Flow '{flow_id}' has no links",
            code=ErrorCode.EMPTY_FLOW,
            details={"flow_id": flow_id},
        )


class FlowNotFoundError(EntityNotFoundError):
    """Raised when the scenario has no flow with the given id."""

    def __init__(self, flow_id: str) -> None:
        super().__init__(
            message=f"Flow '{flow_id}' not found",
            code=ErrorCode.FLOW_NOT_FOUND,
            details={"flow_id": flow_id},
        )
