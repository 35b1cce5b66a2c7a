import re

_NON_WORD = re.compile(r"\W+")


class EndpointName(str):
    """A string subclass holding an endpoint path exactly as the API names it.

    The raw value is used verbatim to build the endpoint URL, while
    ``accessor_key`` gives the camelCase identifier the client exposes it
    under.

    Examples:
        >>> EndpointName("support-tickets").accessor_key
        'supportTickets'

        >>> EndpointName("auth/login").accessor_key
        'authLogin'

    Args:
        name (str): The endpoint path as provided by the API.
    """

    def __new__(cls, name: str) -> "EndpointName":
        return super().__new__(cls, name)

    def __repr__(self) -> str:
        return f"EndpointName({super().__str__()!r})"

    @property
    def accessor_key(self) -> str:
        return accessor_key(self)


def accessor_key(name: str) -> str:
    """Transform an endpoint name into a camelCase key.

    The lowercased name is split on every run of non-word characters; the
    first segment is kept as-is and every following one is capitalized.
    """
    segments = _NON_WORD.split(name.lower())
    return "".join(
        segment if index == 0 else segment[:1].upper() + segment[1:]
        for index, segment in enumerate(segments)
    )
