class BaseUrl:
    """The root URL every endpoint of an API hangs from.

    The URL is normalized so it always ends with exactly one slash, which
    lets endpoint names be appended as-is.

    >>> url = BaseUrl("https://api.net//")
    >>> str(url)
    'https://api.net/'
    >>> url.endpoint_url("auth/login")
    'https://api.net/auth/login/'

    Args:
        url (str): The URL to normalize.
    """

    def __init__(self, url: str):
        self._url = url.rstrip("/") + "/"

    def __str__(self):
        return self._url

    def __repr__(self):
        return f"BaseUrl({self._url})"

    def __eq__(self, other: object):
        if isinstance(other, BaseUrl):
            return self._url == str(other)
        if isinstance(other, str):
            return self._url == other
        return NotImplemented

    def __hash__(self):
        return hash(self._url)

    def endpoint_url(self, name: str) -> str:
        return f"{self._url}{name}/"
