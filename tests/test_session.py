"""Tests for authenticated sessions and token revocation."""

from __future__ import annotations

import uuid

import pytest

from oxide_todo import (
    AuthenticatedSession,
    AuthError,
    AuthErrorKind,
    NotFound,
    SessionToken,
    TodoStatus,
    UnauthenticatedClient,
)
from tests.conftest import BASE_URL, TOKEN, RecordingTransport, todo_json


def _session(transport: RecordingTransport) -> AuthenticatedSession:
    return AuthenticatedSession(SessionToken(TOKEN), transport)


class TestSessionToken:
    def test_repr_redacts_token(self) -> None:
        token = SessionToken("very-secret")
        assert "very-secret" not in repr(token)

    def test_require_after_revoke(self) -> None:
        token = SessionToken("t")
        assert token.require() == "t"
        token.revoke()
        with pytest.raises(AuthError) as exc_info:
            token.require()
        assert exc_info.value.kind == AuthErrorKind.SESSION_REVOKED


class TestRevoke:
    @pytest.mark.asyncio
    async def test_revoke_sends_token(self) -> None:
        transport = RecordingTransport(None)
        session = _session(transport)
        await session.revoke()
        assert session.is_revoked
        assert transport.calls == [
            {
                "method": "POST",
                "path": "/api/auth/revoke",
                "token": TOKEN,
                "body": None,
                "params": None,
            }
        ]

    @pytest.mark.asyncio
    async def test_operations_after_revoke_fail_without_io(self) -> None:
        transport = RecordingTransport(None)
        session = _session(transport)
        await session.revoke()
        todo_id = uuid.uuid4()

        for call in (
            lambda: session.create_todo("x"),
            lambda: session.get_todo(todo_id),
            lambda: session.update_todo(todo_id),
            lambda: session.todos(),
        ):
            with pytest.raises(AuthError) as exc_info:
                call()
            assert exc_info.value.kind == AuthErrorKind.SESSION_REVOKED

        with pytest.raises(AuthError) as exc_info:
            await session.delete_todo(todo_id)
        assert exc_info.value.kind == AuthErrorKind.SESSION_REVOKED

        with pytest.raises(AuthError) as exc_info:
            await session.revoke()
        assert exc_info.value.kind == AuthErrorKind.SESSION_REVOKED

        assert len(transport.calls) == 1

    @pytest.mark.asyncio
    async def test_builder_created_before_revoke_fails_fast(self) -> None:
        transport = RecordingTransport(None)
        session = _session(transport)
        builder = session.create_todo("written before revoke")
        await session.revoke()
        with pytest.raises(AuthError) as exc_info:
            await builder
        assert exc_info.value.kind == AuthErrorKind.SESSION_REVOKED
        assert len(transport.calls) == 1

    @pytest.mark.asyncio
    async def test_revoke_invalidates_every_holder(self) -> None:
        transport = RecordingTransport(None)
        token = SessionToken(TOKEN)
        first = AuthenticatedSession(token, transport)
        second = AuthenticatedSession(token, transport)
        await first.revoke()
        assert second.is_revoked
        with pytest.raises(AuthError):
            second.create_todo("x")

    @pytest.mark.asyncio
    async def test_failed_revoke_keeps_session_usable(self) -> None:
        transport = RecordingTransport(
            AuthError(AuthErrorKind.UNAUTHORIZED, "expired"), todo_json()
        )
        session = _session(transport)
        with pytest.raises(AuthError):
            await session.revoke()
        assert not session.is_revoked
        await session.create_todo("still works")

    @pytest.mark.asyncio
    async def test_metadata_still_available_after_revoke(self) -> None:
        transport = RecordingTransport(None, {"version": "1.0"})
        session = _session(transport)
        await session.revoke()
        meta = await session.server_metadata()
        assert meta.version == "1.0"
        assert transport.calls[-1]["token"] is None


class TestDeleteTodo:
    @pytest.mark.asyncio
    async def test_delete(self, httpx_mock):
        todo_id = uuid.uuid4()
        httpx_mock.add_response(
            url=f"{BASE_URL}/api/todo/{todo_id}", method="DELETE", status_code=204
        )
        client = UnauthenticatedClient(BASE_URL)
        try:
            session = client.login_by_token(TOKEN)
            assert await session.delete_todo(todo_id) is None
            assert httpx_mock.get_request().headers["authorization"] == f"Bearer {TOKEN}"
        finally:
            await client.aclose()

    @pytest.mark.asyncio
    async def test_delete_missing(self, httpx_mock):
        httpx_mock.add_response(
            method="DELETE",
            status_code=404,
            json={"status": 404, "message": "Todo not found"},
        )
        client = UnauthenticatedClient(BASE_URL)
        try:
            session = client.login_by_token(TOKEN)
            with pytest.raises(NotFound):
                await session.delete_todo(str(uuid.uuid4()))
        finally:
            await client.aclose()


class TestGetTodo:
    @pytest.mark.asyncio
    async def test_missing_and_foreign_ids_look_the_same(self, httpx_mock):
        missing, foreign = uuid.uuid4(), uuid.uuid4()
        for todo_id in (missing, foreign):
            httpx_mock.add_response(
                url=f"{BASE_URL}/api/todo/{todo_id}",
                method="GET",
                status_code=404,
                json={"status": 404, "message": "Todo not found"},
            )
        client = UnauthenticatedClient(BASE_URL)
        try:
            session = client.login_by_token(TOKEN)
            errors = []
            for todo_id in (missing, foreign):
                with pytest.raises(NotFound) as exc_info:
                    await session.get_todo(todo_id)
                errors.append((type(exc_info.value), str(exc_info.value)))
            assert errors[0] == errors[1]
        finally:
            await client.aclose()

    def test_rejects_malformed_id(self) -> None:
        session = _session(RecordingTransport())
        with pytest.raises(ValueError):
            session.get_todo("not-a-uuid")

    def test_create_todo_seeds_pending(self) -> None:
        builder = _session(RecordingTransport()).create_todo("buy milk")
        assert builder.title == "buy milk"
        assert builder.status == TodoStatus.PENDING
        assert builder.todo_id is None

    def test_repr_redacts_token(self) -> None:
        assert TOKEN not in repr(_session(RecordingTransport()))
