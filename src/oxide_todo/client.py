"""Unauthenticated entry point: register, login, or resume from a token."""

from __future__ import annotations

import logging
from types import TracebackType

from oxide_todo.core.codec import decode, encode
from oxide_todo.core.config import ClientConfig
from oxide_todo.core.endpoints import Endpoint
from oxide_todo.core.types import AuthResponse, Credentials, ServerMetadata
from oxide_todo.errors import (
    AuthError,
    AuthErrorKind,
    NotFound,
    UnexpectedResponse,
    ValidationError,
)
from oxide_todo.session import AuthenticatedSession, SessionToken
from oxide_todo.transport.base import Transport
from oxide_todo.transport.httpx_transport import HttpxTransport

logger = logging.getLogger(__name__)


class UnauthenticatedClient:
    """Client bound to a service base URL, before any credentials are known.

    Failed login/register calls leave the client untouched, so it can be
    retried with other credentials. Sessions created here share the client's
    transport; close the client (or use ``async with``) when done.

    An injected *transport* is used as is: *base_url* and *config* then only
    populate ``base_url``/``config`` and do not reconfigure the transport.

    Example::

        async with UnauthenticatedClient("http://localhost:8080") as client:
            session = await client.login("username", "password")
            todo = await session.create_todo("My new todo")
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        config: ClientConfig | None = None,
        transport: Transport | None = None,
    ) -> None:
        config = config or ClientConfig()
        if base_url is not None:
            config = config.model_copy(update={"base_url": base_url.rstrip("/")})
        self.config = config
        self._transport = transport or HttpxTransport(config)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    # -- public API ----------------------------------------------------------

    async def register(self, username: str, password: str) -> AuthenticatedSession:
        try:
            session = await self._authenticate(Endpoint.REGISTER, username, password)
        except ValidationError as exc:
            kind = (
                AuthErrorKind.WEAK_PASSWORD
                if exc.field == "password"
                else AuthErrorKind.INVALID_INPUT
            )
            raise AuthError(kind, exc.reason) from exc
        except UnexpectedResponse as exc:
            if exc.status != 409:
                raise
            raise AuthError(AuthErrorKind.USERNAME_TAKEN) from exc
        logger.info("Registered user %s", username)
        return session

    async def login(self, username: str, password: str) -> AuthenticatedSession:
        try:
            session = await self._authenticate(Endpoint.LOGIN, username, password)
        except AuthError as exc:
            if exc.kind is not AuthErrorKind.UNAUTHORIZED:
                raise
            raise AuthError(AuthErrorKind.INVALID_CREDENTIALS, exc.message) from exc
        except (NotFound, ValidationError) as exc:
            # unknown usernames must look like wrong passwords
            raise AuthError(AuthErrorKind.INVALID_CREDENTIALS) from exc
        except UnexpectedResponse as exc:
            if exc.status != 423:
                raise
            raise AuthError(AuthErrorKind.ACCOUNT_LOCKED) from exc
        logger.info("Logged in as %s", username)
        return session

    def login_by_token(self, token: str) -> AuthenticatedSession:
        """Wrap an existing token. Sends nothing and does not check the token."""
        return AuthenticatedSession(SessionToken(token), self._transport)

    async def server_metadata(self) -> ServerMetadata:
        data = await self._transport.send(
            Endpoint.SERVER_METADATA.method,
            Endpoint.SERVER_METADATA.path(),
            resource="server metadata",
        )
        return decode(ServerMetadata, data)

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> UnauthenticatedClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # -- internal ------------------------------------------------------------

    async def _authenticate(
        self,
        endpoint: Endpoint,
        username: str,
        password: str,
    ) -> AuthenticatedSession:
        data = await self._transport.send(
            endpoint.method,
            endpoint.path(),
            body=encode(Credentials(username=username, password=password)),
            resource="user",
        )
        auth = decode(AuthResponse, data)
        return AuthenticatedSession(SessionToken(auth.token), self._transport, user=auth.user)

    def __repr__(self) -> str:
        return f"UnauthenticatedClient(base_url={self.base_url!r})"
