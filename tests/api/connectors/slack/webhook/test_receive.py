"""Testes de autenticação e parsing dos bodies Slack."""

from __future__ import annotations

import pytest

from api.connectors.slack.signature import VerificationFailure
from api.connectors.slack.webhook.receive import (
    authenticate_request,
    parse_events_body,
    parse_interactive_body,
)
from tests.fakes.fake_slack import FIXED_NOW, SIGNING_SECRET, form_body, signed_headers
from utils.errors import AuthenticationError, MalformedPayloadError


def test_authenticate_request_ok() -> None:
    body = b'{"type":"url_verification","challenge":"abc"}'

    authenticate_request(body, signed_headers(body), SIGNING_SECRET, now=FIXED_NOW)


def test_authenticate_request_missing_headers() -> None:
    with pytest.raises(AuthenticationError) as exc_info:
        authenticate_request(b"{}", {}, SIGNING_SECRET, now=FIXED_NOW)

    assert exc_info.value.reason is VerificationFailure.MISSING_HEADERS


def test_authenticate_request_mismatch_does_not_leak_signature() -> None:
    body = b"{}"
    headers = signed_headers(body, secret="another-secret")

    with pytest.raises(AuthenticationError) as exc_info:
        authenticate_request(body, headers, SIGNING_SECRET, now=FIXED_NOW)

    assert exc_info.value.reason is VerificationFailure.SIGNATURE_MISMATCH
    assert headers["x-slack-signature"] not in str(exc_info.value)
    assert SIGNING_SECRET not in str(exc_info.value)


def test_authenticate_request_rejects_empty_secret() -> None:
    body = b"{}"

    with pytest.raises(AuthenticationError):
        authenticate_request(body, signed_headers(body, secret=""), "", now=FIXED_NOW)


def test_parse_events_body_ok() -> None:
    assert parse_events_body(b'{"type":"event_callback"}') == {"type": "event_callback"}


@pytest.mark.parametrize(
    ("raw", "reason"),
    [
        (b"{invalid}", "invalid_json"),
        (b"", "invalid_json"),
        (b"\xff\xff", "invalid_json"),
        (b"[1, 2]", "payload_not_object"),
        (b'"text"', "payload_not_object"),
    ],
)
def test_parse_events_body_malformed(raw: bytes, reason: str) -> None:
    with pytest.raises(MalformedPayloadError, match=reason):
        parse_events_body(raw)


def test_parse_interactive_body_ok() -> None:
    payload = {"type": "block_actions", "actions": [{"action_id": "approve_action"}]}

    assert parse_interactive_body(form_body(payload)) == payload


@pytest.mark.parametrize(
    ("raw", "reason"),
    [
        (b"other=1", "missing_payload_field"),
        (b"payload=%7Bbroken", "invalid_json"),
        (b"payload=%5B%5D", "payload_not_object"),
        (b"payload=\xff", "invalid_form_encoding"),
    ],
)
def test_parse_interactive_body_malformed(raw: bytes, reason: str) -> None:
    with pytest.raises(MalformedPayloadError, match=reason):
        parse_interactive_body(raw)
