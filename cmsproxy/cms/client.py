"""HTTP client for the headless CMS REST API.

Every call goes to ``{cms_url}/api{path}``.  Authenticated calls carry the
configured service token as a bearer credential; :meth:`CMSClient.post_public`
leaves it off for the CMS's own login / register routes.

Failures of any kind (transport error, timeout, non-2xx status, body that is
not JSON) surface as :class:`~cmsproxy.errors.UpstreamError`.  Nothing is
retried.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from cmsproxy.config import Settings
from cmsproxy.errors import UpstreamError

logger = logging.getLogger(__name__)

_DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


def _upstream_message(response: httpx.Response) -> Optional[str]:
    """Pull the CMS error message out of an error response, if there is one.

    The CMS wraps failures as ``{"data": null, "error": {"status", "name",
    "message", "details"}}``.
    """
    try:
        payload = response.json()
    except ValueError:
        return response.text or None
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str):
            return error
    return None


class CMSClient:
    """Thin wrapper over one shared ``httpx.Client``.

    Configuration is fixed at construction.  The underlying connection pool is
    thread-safe, so a single instance serves every request handler.
    """

    def __init__(
        self,
        base_url: str,
        api_token: str = "",
        timeout: float = 30.0,
    ) -> None:
        self._base_url = f"{base_url.rstrip('/')}/api"
        self._auth_headers = {"Authorization": f"Bearer {api_token}"} if api_token else {}
        self._http = httpx.Client(
            base_url=self._base_url,
            headers=_DEFAULT_HEADERS,
            timeout=timeout,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "CMSClient":
        return cls(
            base_url=settings.cms_url,
            api_token=settings.cms_api_token,
            timeout=settings.request_timeout,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    # ------------------------------------------------------------------
    # Verbs
    # ------------------------------------------------------------------

    def get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        return self._request("GET", path, params=params)

    def post(self, path: str, body: Any = None) -> Any:
        return self._request("POST", path, body=body)

    def put(self, path: str, body: Any = None) -> Any:
        return self._request("PUT", path, body=body)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    def post_public(self, path: str, body: Any = None) -> Any:
        """POST without the service credential (CMS auth routes only)."""
        return self._request("POST", path, body=body, authenticated=False)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "CMSClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        body: Any = None,
        authenticated: bool = True,
    ) -> Any:
        headers = self._auth_headers if authenticated else {}
        try:
            response = self._http.request(
                method,
                path,
                params=params,
                json=body,
                headers=headers,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            detail = _upstream_message(exc.response)
            logger.warning(
                "CMS %s %s answered %s: %s",
                method, path, status_code, detail,
                extra={"path": path, "status_code": status_code},
            )
            raise UpstreamError(
                f"CMS {method} {path} failed with status {status_code}",
                status_code=status_code,
                detail=detail,
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "CMS %s %s failed: %r", method, path, exc,
                extra={"path": path},
            )
            raise UpstreamError(
                f"CMS {method} {path} failed: {exc.__class__.__name__}",
                detail=str(exc),
            ) from exc

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError(
                f"CMS {method} {path} returned a non-JSON body",
                status_code=response.status_code,
            ) from exc
