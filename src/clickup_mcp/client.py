import logging
import mimetypes
import time
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import httpx

from .core.config import CLICKUP_API_URL, CLICKUP_V3_API_URL, AppConfig
from .core.errors import ClickUpClientError, ClickUpHTTPError, ClickUpParseError


def with_auth_header(headers: Mapping[str, str], token: str) -> Dict[str, str]:
    """
    Return a copy of `headers` carrying the ClickUp personal token.
    ClickUp expects the raw token, without a "Bearer" prefix.
    """
    token = (token or "").strip()
    if not token:
        raise ValueError("token must be provided.")
    decorated = {k: v for k, v in headers.items() if k.lower() != "authorization"}
    decorated["Authorization"] = token
    return decorated


def rate_limit_state(headers: Mapping[str, str]) -> Tuple[Any, Any]:
    """Read the rate-limit headers ClickUp returns on every response."""
    remaining = headers.get("x-ratelimit-remaining", "100")
    reset = headers.get("x-ratelimit-reset", "0")
    return _as_int(remaining), _as_int(reset)


def _as_int(value: str) -> Any:
    try:
        return int(value)
    except (TypeError, ValueError):
        return value


class ClickUpClient:
    """
    Shared HTTP client for the ClickUp REST API.
    - Applies the personal token to every request
    - Relative URLs hit API v2; absolute URLs (v3 Docs/Chat) pass through
    - Logs rate-limit headers; no retries, no backoff
    - Returns raw JSON payloads; services own the unwrapping
    """

    def __init__(
        self,
        *,
        token: str,
        base_url: str = CLICKUP_API_URL,
        v3_base_url: str = CLICKUP_V3_API_URL,
        timeout_seconds: float = 30.0,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        token = (token or "").strip()
        base_url = (base_url or "").rstrip("/")

        if not token:
            raise ValueError("token must be provided.")
        if not base_url:
            raise ValueError("base_url must be provided.")

        self._token = token
        self.base_url = base_url
        self.v3_base_url = (v3_base_url or CLICKUP_V3_API_URL).rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.log = logger or logging.getLogger("clickup_mcp.client")

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
            timeout=timeout_seconds,
        )

    @classmethod
    def from_config(cls, config: AppConfig, **kwargs: Any) -> "ClickUpClient":
        return cls(
            token=config.clickup_personal_token,
            base_url=config.api_url,
            v3_base_url=config.v3_api_url,
            **kwargs,
        )

    def v3_url(self, path: str) -> str:
        return f"{self.v3_base_url}/{path.lstrip('/')}"

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "ClickUpClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
        tool: Optional[str] = None,
    ) -> Any:
        """
        Core request method.
        - Raises ClickUpHTTPError on non-2xx HTTP responses
        - Raises ClickUpClientError on network/timeout errors
        - Raises ClickUpParseError if the response isn't valid JSON
        - Returns the parsed JSON body ({} when empty)
        """
        method = method.upper()
        start = time.perf_counter()

        try:
            resp = await self.http.request(
                method,
                url,
                params=params,
                json=json,
                headers=with_auth_header({}, self._token),
            )
        except httpx.HTTPError as exc:
            raise ClickUpClientError(
                f"Network/timeout error calling {method} {url}: {exc}"
            ) from exc

        self._after_response(resp, method=method, tool=tool, start=start)

        if resp.status_code < 200 or resp.status_code >= 300:
            raise self._to_http_error(resp, method=method)

        return self._safe_json(resp)

    def _after_response(
        self, resp: httpx.Response, *, method: str, tool: Optional[str], start: float
    ) -> None:
        duration_ms = int((time.perf_counter() - start) * 1000)
        self.log.debug(
            "clickup.request",
            extra={
                "tool": tool,
                "method": method,
                "url": str(resp.request.url),
                "status": resp.status_code,
                "duration_ms": duration_ms,
            },
        )

        remaining, reset = rate_limit_state(resp.headers)
        self.log.debug(
            "Rate limit: %s requests remaining, reset in %ss",
            remaining,
            reset,
            extra={"remaining": remaining, "reset": reset},
        )
        if resp.status_code == 429:
            self.log.warning(
                "Rate limit exceeded",
                extra={"url": str(resp.request.url), "status": 429},
            )

    def _safe_json(self, resp: httpx.Response) -> Any:
        # Handle empty responses (204 No Content, etc.)
        if not resp.content:
            return {}

        try:
            return resp.json()
        except ValueError as exc:
            snippet = (resp.text or "")[:500]
            raise ClickUpParseError(
                f"Expected JSON from {resp.request.method} "
                f"{resp.request.url}, got non-JSON body snippet: "
                f"{snippet!r}"
            ) from exc

    def _to_http_error(self, resp: httpx.Response, *, method: str) -> ClickUpHTTPError:
        url = str(resp.request.url)
        response_json = None
        response_text: Optional[str] = None
        message = "request failed"

        try:
            parsed = resp.json()
        except ValueError:
            response_text = (resp.text or "")[:500]
        else:
            response_json = parsed
            if isinstance(parsed, dict):
                # ClickUp errors look like {"err": "...", "ECODE": "..."}
                message = (
                    parsed.get("err")
                    or parsed.get("message")
                    or parsed.get("error")
                    or message
                )

        return ClickUpHTTPError(
            status_code=resp.status_code,
            method=method,
            url=url,
            message=message,
            response_json=response_json,
            response_text=response_text,
        )

    async def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        tool: Optional[str] = None,
    ) -> Any:
        return await self.request("GET", url, params=params, tool=tool)

    async def post(
        self, url: str, *, json: Optional[Any] = None, tool: Optional[str] = None
    ) -> Any:
        return await self.request("POST", url, json=json, tool=tool)

    async def put(
        self, url: str, *, json: Optional[Any] = None, tool: Optional[str] = None
    ) -> Any:
        return await self.request("PUT", url, json=json, tool=tool)

    async def patch(
        self, url: str, *, json: Optional[Any] = None, tool: Optional[str] = None
    ) -> Any:
        return await self.request("PATCH", url, json=json, tool=tool)

    async def delete(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        tool: Optional[str] = None,
    ) -> Any:
        return await self.request("DELETE", url, params=params, tool=tool)

    async def post_file(
        self,
        url: str,
        *,
        file_path: str,
        field_name: str = "attachment",
        data: Optional[Dict[str, str]] = None,
        content_type: Optional[str] = None,
        tool: Optional[str] = None,
    ) -> Any:
        """
        Upload a file using multipart/form-data.
        - Streams from disk (does not load entire file into memory).
        - Returns parsed JSON if present; {} on empty body.
        """
        path = Path(file_path)
        if not path.is_file():
            raise ClickUpClientError(f"File not found: {file_path}")

        ctype = (
            content_type
            or mimetypes.guess_type(path.name)[0]
            or "application/octet-stream"
        )

        start = time.perf_counter()
        try:
            with path.open("rb") as fh:
                # Drop the JSON content type so httpx can set the multipart boundary.
                old_ct = self.http.headers.pop("Content-Type", None)
                try:
                    resp = await self.http.post(
                        url,
                        data=data or None,
                        files={field_name: (path.name, fh, ctype)},
                        headers=with_auth_header({}, self._token),
                    )
                finally:
                    if old_ct is not None:
                        self.http.headers["Content-Type"] = old_ct
        except httpx.HTTPError as exc:
            raise ClickUpClientError(
                f"Network/timeout error calling POST {url}: {exc}"
            ) from exc

        self._after_response(resp, method="POST", tool=tool, start=start)

        if resp.status_code < 200 or resp.status_code >= 300:
            raise self._to_http_error(resp, method="POST")

        return self._safe_json(resp)


__all__ = [
    "ClickUpClient",
    "with_auth_header",
    "rate_limit_state",
    "ClickUpClientError",
    "ClickUpHTTPError",
    "ClickUpParseError",
]
