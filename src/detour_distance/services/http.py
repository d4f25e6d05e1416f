"""
HTTP session for routing providers.

Routing requests retry only on responses that mean "try again later"
(429, 502, 503, 504). A 404 from the routing server means "no route" and
a 500 is a real failure; neither is retried. Timeouts are set per request
by the provider, from ``Settings.http_timeout``.
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from detour_distance import __version__

#: Statuses worth retrying for a route query.
RETRY_STATUSES = (429, 502, 503, 504)

ROUTING_RETRY = Retry(
    total=3,
    backoff_factor=1,  # 0s, 1s, 2s between retries
    status_forcelist=RETRY_STATUSES,
    allowed_methods=["GET"],
    raise_on_status=False,  # providers map the final status to a RouteResult
)


def create_session(retry: Retry | None = None) -> requests.Session:
    """
    Build a ``requests.Session`` for route queries.

    Args:
        retry: Custom retry strategy (defaults to ``ROUTING_RETRY``).
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or ROUTING_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = f"detour-distance/{__version__}"
    return s
