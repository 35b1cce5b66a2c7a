from typing import Optional


class BaseUrlMissingError(Exception):
    def __init__(
        self,
        message="Base URL required. Pass it to GRest() or set GREST_URL.",
    ):
        self.message = message
        super().__init__(self.message)


class EndpointConflictError(ValueError):
    """Two distinct endpoint names normalize to the same accessor key."""

    def __init__(self, key: str, registered: str, incoming: str):
        self.key = key
        self.registered = registered
        self.incoming = incoming
        self.message = (
            f"endpoint '{incoming}' maps to accessor '{key}', "
            f"already taken by endpoint '{registered}'"
        )
        super().__init__(self.message)


class EndpointNotFoundError(KeyError):
    def __init__(self, key: str, message: Optional[str] = None):
        self.key = key
        self.message = message or f"no endpoint registered under '{key}'"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
