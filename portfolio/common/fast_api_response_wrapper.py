from http import HTTPStatus
from typing import Any

from fastapi import Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def api_response(
    message: str,
    success: bool = True,
    data: Any = None,
    status_code: HTTPStatus = HTTPStatus.OK,
) -> JSONResponse:
    """
    Generate a standardized JSON API response.

    This function creates a consistent JSON response format for API endpoints,
    including a success flag, message, optional data payload, and HTTP status code.

    Args:
        message (str): A descriptive message explaining the result of the API call.
        success (bool): Whether the API call succeeded (True) or failed (False).
        data (Any): Optional payload to include in the response body. DTOs are
                    serialized with their camelCase aliases. Can be None.
        status_code (HTTPStatus): The HTTP status code for the response.
                                  Defaults to HTTPStatus.OK (200).

    Returns:
        JSONResponse: A FastAPI/Starlette JSONResponse object containing the
                      structured response body and HTTP status code.

    Example:
        return api_response(
            message="Skill created successfully",
            data={"skill": skill_dto},
            status_code=HTTPStatus.CREATED,
        )
    """

    response_body = {
        "success": success,
        "message": message,
        "data": data,
    }
    serialized_body = jsonable_encoder(response_body)

    return JSONResponse(
        status_code=status_code.value,
        content=serialized_body,
    )


def no_content_response() -> Response:
    """Empty 204 response used by delete operations."""
    return Response(status_code=HTTPStatus.NO_CONTENT.value)
