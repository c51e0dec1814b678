"""Testes do classificador de payloads Slack."""

from __future__ import annotations

import pytest

from api.normalizers.slack import classify_event_payload, classify_interaction_payload
from app.domain import EventCallback, InteractionCallback, Unrecognized, UrlVerification
from tests.fakes.fake_slack import block_actions_payload, event_callback_payload


class TestClassifyEventPayload:
    def test_url_verification(self) -> None:
        result = classify_event_payload({"type": "url_verification", "challenge": "abc123"})

        assert result == UrlVerification(challenge="abc123")
        assert result.kind == "url_verification"

    def test_url_verification_without_challenge_is_unrecognized(self) -> None:
        result = classify_event_payload({"type": "url_verification"})

        assert isinstance(result, Unrecognized)
        assert result.reason == "invalid_url_verification"

    def test_app_mention(self) -> None:
        payload = event_callback_payload("app_mention")

        result = classify_event_payload(payload)

        assert isinstance(result, EventCallback)
        assert result.event_type == "app_mention"
        assert result.channel_id == "C123"
        assert result.channel_type is None
        assert result.raw is payload
        assert result.event["text"] == "<@U0BOT> hello"

    def test_direct_message(self) -> None:
        result = classify_event_payload(event_callback_payload("message", channel_type="im"))

        assert isinstance(result, EventCallback)
        assert result.event_type == "message"
        assert result.channel_type == "im"

    @pytest.mark.parametrize("event_type", ["channel_created", "channel_rename"])
    def test_object_valued_channel_is_still_event_callback(self, event_type: str) -> None:
        payload = {
            "type": "event_callback",
            "event": {"type": event_type, "channel": {"id": "C1", "name": "general"}},
        }

        result = classify_event_payload(payload)

        assert isinstance(result, EventCallback)
        assert result.event_type == event_type
        assert result.channel_id is None
        assert result.channel_type is None

    def test_event_callback_without_event_is_unrecognized(self) -> None:
        result = classify_event_payload({"type": "event_callback"})

        assert isinstance(result, Unrecognized)
        assert result.reason == "invalid_event_callback"

    def test_event_without_type_is_unrecognized(self) -> None:
        result = classify_event_payload({"type": "event_callback", "event": {"channel": "C1"}})

        assert isinstance(result, Unrecognized)

    @pytest.mark.parametrize(
        "payload",
        [{}, {"type": None}, {"type": 42}, {"challenge": "abc"}],
    )
    def test_missing_type(self, payload: dict[str, object]) -> None:
        result = classify_event_payload(payload)

        assert result == Unrecognized(reason="missing_type")

    def test_unknown_type(self) -> None:
        result = classify_event_payload({"type": "app_rate_limited"})

        assert result == Unrecognized(reason="unsupported_type")


class TestClassifyInteractionPayload:
    def test_block_actions_takes_first_action(self) -> None:
        payload = block_actions_payload("cancel_action")
        payload["actions"].append({"action_id": "approve_action"})

        result = classify_interaction_payload(payload)

        assert isinstance(result, InteractionCallback)
        assert result.interaction_type == "block_actions"
        assert result.action_id == "cancel_action"
        assert result.channel_id == "C123"
        assert result.message_ts == "1700000000.000100"
        assert result.kind == "interaction_callback"

    def test_block_actions_without_channel_or_message(self) -> None:
        result = classify_interaction_payload(
            {"type": "block_actions", "actions": [{"action_id": "approve_action"}]}
        )

        assert isinstance(result, InteractionCallback)
        assert result.channel_id is None
        assert result.message_ts is None

    @pytest.mark.parametrize(
        "payload",
        [
            {"type": "block_actions", "actions": []},
            {"type": "block_actions"},
            {"type": "block_actions", "actions": "approve_action"},
        ],
    )
    def test_block_actions_without_actions_is_unrecognized(
        self, payload: dict[str, object]
    ) -> None:
        result = classify_interaction_payload(payload)

        assert result == Unrecognized(reason="invalid_block_actions")

    def test_other_interaction_type(self) -> None:
        result = classify_interaction_payload({"type": "view_submission"})

        assert result == Unrecognized(reason="unsupported_type")

    def test_missing_type(self) -> None:
        assert classify_interaction_payload({}) == Unrecognized(reason="missing_type")
