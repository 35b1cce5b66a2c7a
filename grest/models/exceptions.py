from typing import Optional

from httpx import HTTPStatusError, Response


class TransportError(Exception):
    """Raised by a transport when a request did not succeed.

    ``response`` is set when the server answered with an error status and is
    ``None`` for failures where no answer came back: network errors, a URL
    httpx refuses to build, or a closed transport.
    """

    def __init__(self, message: str, response: Optional[Response] = None) -> None:
        self.message = message
        self.response = response
        super().__init__(message)

    @classmethod
    def from_httpx(cls, error: Exception) -> "TransportError":
        if isinstance(error, HTTPStatusError):
            return cls(str(error), response=error.response)

        return cls(str(error))
