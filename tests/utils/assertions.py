"""Test utilities for asserting API responses and message codes."""

from typing import Any

from httpx import Response

from src.api.core.messages import MessageCode


def assert_success_response(
    response: Response,
    expected_message_code: MessageCode = MessageCode.SUCCESS,
    expected_status: int = 200,
    data_assertions: dict[str, Any] | None = None,
) -> Any:
    """Assert that response is successful with expected message code.

    Args:
        response: HTTP response to check
        expected_message_code: Expected message code
        expected_status: Expected HTTP status code
        data_assertions: Optional dict of assertions to run on response data

    Returns:
        Response data for further assertions
    """
    assert response.status_code == expected_status, (
        f"Expected status {expected_status}, got {response.status_code}. "
        f"Response: {response.text}"
    )

    json_data = response.json()

    assert json_data.get("message_code") == expected_message_code.value, (
        f"Expected message_code {expected_message_code.value}, "
        f"got {json_data.get('message_code')}"
    )
    assert "message" in json_data, "Success response should have message"

    if data_assertions:
        data = json_data.get("data")
        for field, expected_value in data_assertions.items():
            assert (
                data[field] == expected_value
            ), f"Expected {field} to be {expected_value}, got {data[field]}"

    return json_data.get("data")


def assert_error_response(
    response: Response,
    expected_message_code: MessageCode,
    expected_status: int,
    expected_message: str | None = None,
) -> dict[str, Any]:
    """Assert that response is an error with expected message code.

    Args:
        response: HTTP response to check
        expected_message_code: Expected error message code
        expected_status: Expected HTTP status code
        expected_message: Optional expected error message

    Returns:
        Response data for further assertions
    """
    assert response.status_code == expected_status, (
        f"Expected status {expected_status}, got {response.status_code}. "
        f"Response: {response.text}"
    )

    json_data = response.json()

    assert json_data.get("message_code") == expected_message_code.value, (
        f"Expected message_code {expected_message_code.value}, "
        f"got {json_data.get('message_code')}"
    )

    if expected_message:
        assert json_data.get("message") == expected_message, (
            f"Expected message '{expected_message}', "
            f"got '{json_data.get('message')}'"
        )

    return json_data


def assert_field_errors(
    response: Response, expected_errors: dict[str, list[str]]
) -> dict[str, Any]:
    """Assert a 400 response whose details map fields to error messages."""
    json_data = assert_error_response(response, MessageCode.VALIDATION_ERROR, 400)
    assert json_data.get("details") == expected_errors, (
        f"Expected field errors {expected_errors}, got {json_data.get('details')}"
    )
    return json_data


def assert_not_found_error(
    response: Response, expected_message: str | None = None
) -> dict[str, Any]:
    """Assert that response is a message not found error."""
    return assert_error_response(
        response, MessageCode.MESSAGE_NOT_FOUND, 404, expected_message
    )
