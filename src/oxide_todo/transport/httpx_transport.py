"""Transport adapter over ``httpx.AsyncClient``."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from oxide_todo.core.config import ClientConfig
from oxide_todo.core.types import ServiceErrorPayload
from oxide_todo.errors import DecodeError, TransportError, UnexpectedResponse, error_from_payload

logger = logging.getLogger(__name__)


class HttpxTransport:
    """Talks JSON to the todo service. One network call per ``send``, no retries."""

    def __init__(
        self,
        config: ClientConfig,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self._http = client or httpx.AsyncClient(
            base_url=config.base_url,
            timeout=httpx.Timeout(config.timeout_seconds),
            headers={"User-Agent": config.user_agent, "Accept": "application/json"},
            verify=config.verify_ssl,
        )

    # -- public API ----------------------------------------------------------

    async def send(
        self,
        method: str,
        path: str,
        *,
        token: str | None = None,
        body: Any = None,
        params: dict[str, Any] | None = None,
        resource: str = "resource",
    ) -> Any:
        headers: dict[str, str] = {}
        if token is not None:
            headers["Authorization"] = f"Bearer {token}"

        logger.debug("%s %s", method, path)
        try:
            resp = await self._http.request(
                method,
                path,
                headers=headers,
                json=body,
                params=params,
            )
        except httpx.TransportError as exc:
            raise TransportError(f"{method} {path} failed: {exc}", cause=exc) from exc

        logger.debug("%s %s -> %d", method, path, resp.status_code)
        if resp.is_success:
            return self._decode_success(resp)
        raise self._decode_failure(resp, resource)

    async def aclose(self) -> None:
        await self._http.aclose()

    # -- internal ------------------------------------------------------------

    @staticmethod
    def _decode_success(resp: httpx.Response) -> Any:
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise DecodeError(f"Response body is not JSON: {exc}", body=resp.text) from exc

    @staticmethod
    def _decode_failure(resp: httpx.Response, resource: str) -> Exception:
        try:
            payload = ServiceErrorPayload.model_validate(resp.json())
        except (ValueError, PydanticValidationError):
            logger.warning(
                "Undecodable error body from %s (status %d)",
                resp.request.url.path, resp.status_code,
            )
            return UnexpectedResponse(resp.status_code, resp.text)
        return error_from_payload(
            resp.status_code,
            payload,
            resource=resource,
            raw_body=resp.text,
        )
