import json
from contextlib import contextmanager
from typing import Generator

import httpx

from ..models.errors import DecodeError, HTTPStatusError, TransportError


@contextmanager
def handle_errors() -> Generator[None, None, None]:
    """Context manager for translating httpx failures into hatstall errors.

    Yields:
        None: The context manager yields control to the wrapped code.

    Raises:
        HTTPStatusError: For responses with a non-2xx status code.
        TransportError: For connection, timeout and protocol failures.
        DecodeError: For bodies that are not valid JSON.
    """
    try:
        yield
    except httpx.HTTPStatusError as e:
        try:
            error_body = e.response.json()
        except ValueError:
            error_body = e.response.text

        status_code = e.response.status_code

        message = None
        if isinstance(error_body, dict):
            message = (
                error_body.get("message")
                or error_body.get("error")
                or error_body.get("detail")
            )
            error_body = json.dumps(error_body)

        raise HTTPStatusError(
            message or e.response.reason_phrase or str(e), status_code, error_body
        ) from e
    except httpx.TransportError as e:
        raise TransportError(str(e) or type(e).__name__) from e
    except json.JSONDecodeError as e:
        raise DecodeError(f"Response body is not valid JSON: {e}") from e
