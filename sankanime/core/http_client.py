"""HTTP transport for sankanime."""

from typing import Any, Dict, Optional

import requests

from .errors import ResponseDecodeError, TransportError

# Constants
DEFAULT_TIMEOUT = 15
UA = "sankanime-client/0.1"


def _req(method: str, url: str, **kw) -> requests.Response:
    """Internal request function; maps requests failures onto TransportError."""
    timeout = kw.pop("timeout", DEFAULT_TIMEOUT)
    headers = {"User-Agent": UA, **kw.pop("headers", {})}

    try:
        r = requests.request(method, url, timeout=timeout, headers=headers, **kw)
        r.raise_for_status()
        return r
    except requests.HTTPError as e:
        resp = getattr(e, "response", None)
        sc = resp.status_code if resp is not None else None
        raise TransportError(f"{sc} upstream: {url}", status_code=sc, url=url) from e
    except requests.Timeout as e:
        raise TransportError(f"timed out: {url}", url=url) from e
    except requests.RequestException as e:
        raise TransportError(str(e), url=url) from e


def join_url(base_url: str, path: str) -> str:
    return base_url.rstrip("/") + "/" + path.lstrip("/")


def http_get(url: str, **kw) -> requests.Response:
    return _req("GET", url, **kw)


def get_json(base_url: str, path: str, params: Optional[Dict[str, Any]] = None, **kw) -> Any:
    """GET `path` under `base_url` and decode the JSON body."""
    url = join_url(base_url, path)
    if params:
        params = {k: v for k, v in params.items() if v is not None}
    r = http_get(url, params=params or None, **kw)
    try:
        return r.json()
    except ValueError as e:
        raise ResponseDecodeError(f"invalid JSON from {url}", url=url) from e
