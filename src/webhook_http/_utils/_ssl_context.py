import ssl
from typing import Any

import truststore


def get_httpx_client_kwargs(follow_redirects: bool = False) -> dict[str, Any]:
    """Keyword arguments shared by every transport client the package creates.

    Certificates are verified against the system trust store. No timeout is
    set here, so the ``httpx`` default applies.
    """
    return {
        "verify": truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT),
        "follow_redirects": follow_redirects,
    }
