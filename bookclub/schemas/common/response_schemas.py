# Standard library imports
from typing import Any

# Third-party imports
from pydantic import BaseModel

# Define a union type for error details: string, list of strings, or a dict.
DetailsType = str | list[str] | dict[str, Any]


class ErrorResponse(BaseModel):
    """Body of every failed request: the message under `error`, plus a stable code."""

    error: str
    code: str
    details: DetailsType | None = None

    def model_dump(self, **kwargs: Any) -> dict[str, Any]:
        data = super().model_dump(**kwargs)

        # Remove empty error details
        if data.get("details") is None:
            data.pop("details", None)

        return data

    @classmethod
    def failure(cls, code: str, message: str, details: DetailsType | None = None) -> "ErrorResponse":
        return cls(error=message, code=code, details=details)


class SuccessResponse(BaseModel):
    success: bool = True
