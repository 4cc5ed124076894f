"""Typed outcomes of form submissions and list actions."""

from dataclasses import dataclass
from typing import Any, Literal, Optional

ResultStatus = Literal["success", "validation_error", "remote_error", "rejected"]


@dataclass(frozen=True)
class SubmitResult:
    """Outcome of a form submission or a confirmation-gated action.

    ``rejected`` means nothing was attempted: the form was not open, a
    request was already in flight, or a confirmation was declined.
    """

    status: ResultStatus
    entity: Optional[Any] = None
    message: Optional[str] = None
    field: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "success"

    @classmethod
    def success(cls, entity: Any = None, message: Optional[str] = None) -> "SubmitResult":
        return cls(status="success", entity=entity, message=message)

    @classmethod
    def validation_error(cls, message: str, field: Optional[str] = None) -> "SubmitResult":
        return cls(status="validation_error", message=message, field=field)

    @classmethod
    def remote_error(cls, message: str) -> "SubmitResult":
        return cls(status="remote_error", message=message)

    @classmethod
    def rejected(cls, message: Optional[str] = None) -> "SubmitResult":
        return cls(status="rejected", message=message)
