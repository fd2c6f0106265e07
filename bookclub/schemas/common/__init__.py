from .response_schemas import ErrorResponse, SuccessResponse

__all__ = ["ErrorResponse", "SuccessResponse"]
