"""Promotion service client.

This module provides:
- PromotionClient: Protocol for the two promotion RPCs (injectable for tests)
- HttpPromotionClient: Connect-protocol JSON client using urllib
- MockPromotionClient: Canned responses for testing

The server speaks the Connect unary protocol: each RPC is a JSON POST to
`<server>/<service>/<Method>`; failures come back as a non-2xx status with a
`{"code": ..., "message": ...}` body.
"""

from __future__ import annotations

import http.client
import json
import socket
import ssl
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from freightctl import __version__
from freightctl.core.result import Err, Ok, Partial, Result
from freightctl.core.structured import StrDict, as_str_dict, get_list, get_str, get_table, is_str_dict

from .types import Promotion

__all__ = [
    "SERVICE_NAME",
    "PromoteCall",
    "RemoteError",
    "PromotionClient",
    "HttpPromotionClient",
    "MockPromotionClient",
]

SERVICE_NAME = "akuity.io.kargo.service.v1alpha1.KargoService"

DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class PromoteCall:
    """Wire request shared by both promotion RPCs.

    Both freight identifiers are sent; the server resolves whichever is set.
    """

    project: str
    freight: str
    freight_alias: str
    stage: str

    def to_wire(self) -> dict[str, str]:
        body = {"project": self.project, "stage": self.stage}
        if self.freight:
            body["freight"] = self.freight
        if self.freight_alias:
            body["freightAlias"] = self.freight_alias
        return body


@dataclass(frozen=True, slots=True)
class RemoteError:
    """A failed RPC.

    Attributes:
        code: Connect error code (e.g. "not_found", "unavailable")
        message: Human-readable message from the server or transport
        status: HTTP status (0 when no response was received)
    """

    code: str
    message: str
    status: int = 0

    def __str__(self) -> str:
        if self.message:
            return f"{self.code}: {self.message}"
        return self.code


@runtime_checkable
class PromotionClient(Protocol):
    def promote_to_stage(
        self, call: PromoteCall, *, timeout: float | None = None
    ) -> Result[Promotion, RemoteError]:
        """Promote freight to a single stage.

        Returns:
            Ok with the created promotion, or Err with RemoteError
        """
        ...

    def promote_subscribers(
        self, call: PromoteCall, *, timeout: float | None = None
    ) -> Partial[list[Promotion], RemoteError]:
        """Promote freight to every subscriber of `call.stage`.

        The server may create some promotions and still fail, so the value
        and the error can both be present.
        """
        ...


# Connect's mapping for responses that carry no code of their own.
_HTTP_STATUS_CODES: dict[int, str] = {
    400: "internal",
    401: "unauthenticated",
    403: "permission_denied",
    404: "unimplemented",
    429: "unavailable",
    502: "unavailable",
    503: "unavailable",
    504: "unavailable",
}


def _code_for_status(status: int) -> str:
    return _HTTP_STATUS_CODES.get(status, "unknown")


def _decode_error_body(status: int, reason: str, raw: bytes) -> Partial[StrDict, RemoteError]:
    data: StrDict | None = None
    try:
        data = as_str_dict(json.loads(raw.decode("utf-8"))) if raw else None
    except (json.JSONDecodeError, UnicodeDecodeError):
        data = None

    if data is None:
        return Partial(None, RemoteError(_code_for_status(status), reason, status))

    error = RemoteError(
        code=get_str(data, "code") or _code_for_status(status),
        message=get_str(data, "message") or reason,
        status=status,
    )
    # Only keep the body as a value when it carries results next to the error.
    value = data if "promotions" in data or "promotion" in data else None
    return Partial(value, error)


def _read_error_body(e: urllib.error.HTTPError) -> bytes:
    try:
        return e.read()
    except (OSError, http.client.HTTPException):
        return b""


class HttpPromotionClient:
    """Promotion client over HTTP(S) using urllib.

    Handles:
    - Bearer token authentication
    - HTTPS with system certificates (or no verification when asked)
    - Per-call timeouts, surfaced as "deadline_exceeded"
    """

    def __init__(
        self,
        base_url: str,
        *,
        bearer_token: str | None = None,
        insecure_skip_tls_verify: bool = False,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = f"freightctl/{__version__}",
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.user_agent = user_agent
        self._bearer_token = bearer_token
        self._ssl_context = ssl.create_default_context()
        if insecure_skip_tls_verify:
            self._ssl_context.check_hostname = False
            self._ssl_context.verify_mode = ssl.CERT_NONE

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Connect-Protocol-Version": "1",
            "User-Agent": self.user_agent,
        }
        if self._bearer_token:
            headers["Authorization"] = f"Bearer {self._bearer_token}"
        return headers

    def _call(
        self, method: str, payload: dict[str, str], timeout: float | None
    ) -> Partial[StrDict, RemoteError]:
        url = f"{self.base_url}/{SERVICE_NAME}/{method}"
        req = urllib.request.Request(
            url,
            data=json.dumps(payload).encode("utf-8"),
            headers=self._headers(),
            method="POST",
        )
        try:
            with urllib.request.urlopen(
                req,
                timeout=timeout if timeout is not None else self.timeout,
                context=self._ssl_context,
            ) as response:
                raw: bytes = response.read()
        except urllib.error.HTTPError as e:
            return _decode_error_body(e.code, str(e.reason), _read_error_body(e))
        except urllib.error.URLError as e:
            if isinstance(e.reason, (TimeoutError, socket.timeout)):
                return Partial(None, RemoteError("deadline_exceeded", "request timed out"))
            return Partial(None, RemoteError("unavailable", f"{e.reason} ({url})"))
        except TimeoutError:
            return Partial(None, RemoteError("deadline_exceeded", "request timed out"))
        except http.client.HTTPException as e:
            # Malformed status line or a body cut short by the server.
            return Partial(None, RemoteError("unavailable", f"{e!r} ({url})"))
        except ValueError as e:
            return Partial(None, RemoteError("invalid_argument", str(e)))
        except OSError as e:
            return Partial(None, RemoteError("unavailable", str(e)))

        try:
            data = as_str_dict(json.loads(raw.decode("utf-8"))) if raw else {}
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Partial(None, RemoteError("internal", f"invalid JSON response: {e}"))
        if data is None:
            return Partial(None, RemoteError("internal", "expected a JSON object response"))
        return Partial(data, None)

    def promote_to_stage(
        self, call: PromoteCall, *, timeout: float | None = None
    ) -> Result[Promotion, RemoteError]:
        result = self._call("PromoteToStage", call.to_wire(), timeout)
        if result.error is not None:
            return Err(result.error)

        promotion = get_table(result.value or {}, "promotion")
        if promotion is None:
            return Err(RemoteError("internal", "response did not include a promotion"))
        return Ok(Promotion.from_wire(promotion))

    def promote_subscribers(
        self, call: PromoteCall, *, timeout: float | None = None
    ) -> Partial[list[Promotion], RemoteError]:
        result = self._call("PromoteSubscribers", call.to_wire(), timeout)
        return result.map(_promotions_from_body)


def _promotions_from_body(body: StrDict) -> list[Promotion]:
    items = get_list(body, "promotions") or []
    return [Promotion.from_wire(item) for item in items if is_str_dict(item)]


class MockPromotionClient:
    """Promotion client with canned responses for testing.

    Usage:
        client = MockPromotionClient()
        client.set_stage_response(Ok(Promotion(name="promo-1")))
        result = client.promote_to_stage(call)
        assert client.calls == [("promote_to_stage", call, None)]
    """

    def __init__(self) -> None:
        self._stage_response: Result[Promotion, RemoteError] = Err(
            RemoteError("unimplemented", "no stage response configured (mock)")
        )
        self._subscribers_response: Partial[list[Promotion], RemoteError] = Partial(
            None, RemoteError("unimplemented", "no subscribers response configured (mock)")
        )
        self.calls: list[tuple[str, PromoteCall, float | None]] = []

    def set_stage_response(self, response: Result[Promotion, RemoteError]) -> None:
        self._stage_response = response

    def set_subscribers_response(self, response: Partial[list[Promotion], RemoteError]) -> None:
        self._subscribers_response = response

    def promote_to_stage(
        self, call: PromoteCall, *, timeout: float | None = None
    ) -> Result[Promotion, RemoteError]:
        self.calls.append(("promote_to_stage", call, timeout))
        return self._stage_response

    def promote_subscribers(
        self, call: PromoteCall, *, timeout: float | None = None
    ) -> Partial[list[Promotion], RemoteError]:
        self.calls.append(("promote_subscribers", call, timeout))
        return self._subscribers_response
