import os
import ssl
from typing import Any, Dict, Optional, Union

from .constants import ENV_DISABLE_SSL_VERIFY

VerifyTypes = Union[bool, str, ssl.SSLContext]

DEFAULT_TIMEOUT = 30.0


def ssl_disabled_from_env() -> bool:
    return os.environ.get(ENV_DISABLE_SSL_VERIFY, "").lower() in ("1", "true", "yes", "on")


def create_ssl_context(ca_bundle: Optional[str] = None) -> ssl.SSLContext:
    """Build the SSL context the httpx clients verify servers with.

    An explicit ``ca_bundle`` path wins. Otherwise the system trust store is
    used through truststore, and the certifi bundle when truststore is not
    installed.
    """
    if ca_bundle:
        return ssl.create_default_context(
            cafile=os.path.expanduser(os.path.expandvars(ca_bundle))
        )

    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        return ssl.create_default_context(
            cafile=os.environ.get("SSL_CERT_FILE") or certifi.where(),
            capath=os.environ.get("SSL_CERT_DIR"),
        )


def get_httpx_client_kwargs(
    verify: Optional[VerifyTypes] = None,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
) -> Dict[str, Any]:
    """Get the keyword arguments both httpx clients of a transport share.

    Args:
        verify: ``False`` to skip certificate checks, a CA bundle path, a
            ready ``ssl.SSLContext``, or ``True`` for the default context.
            ``None`` defers to ``GREST_DISABLE_SSL_VERIFY``.
        timeout: Default timeout of every request, in seconds.
    """
    if verify is None:
        verify = not ssl_disabled_from_env()

    if isinstance(verify, ssl.SSLContext) or verify is False:
        context: Union[bool, ssl.SSLContext] = verify
    elif verify is True:
        context = create_ssl_context()
    else:
        context = create_ssl_context(verify)

    # HTTP_PROXY, HTTPS_PROXY, NO_PROXY are read by httpx by default
    return {"follow_redirects": True, "timeout": timeout, "verify": context}
