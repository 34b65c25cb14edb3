"""Tests for envelope normalization."""
import pytest
from pydantic import ValidationError

from medicare_client.envelope import Failure, Success, from_payload, DEFAULT_ERROR_MESSAGE


class TestFromPayload:
    """Loose backend bodies fold into exactly two shapes."""

    def test_success_body(self):
        result = from_payload({"success": True, "data": [{"_id": "a1"}], "message": "OK"}, 200)

        assert isinstance(result, Success)
        assert result.data == [{"_id": "a1"}]
        assert result.message == "OK"
        assert result.status == 200

    def test_failure_body_on_2xx(self):
        result = from_payload({"success": False, "message": "Slot already taken"}, 200)

        assert isinstance(result, Failure)
        assert result.message == "Slot already taken"
        assert result.data is None

    def test_failure_without_message_uses_default(self):
        result = from_payload({"success": False}, 200)

        assert result.message == DEFAULT_ERROR_MESSAGE

    def test_legacy_status_flag_counts_as_success(self):
        result = from_payload({"status": True, "token": "t", "role": "doctor", "data": {"_id": "d1"}})

        assert isinstance(result, Success)
        assert result.token == "t"
        assert result.role == "doctor"

    def test_falsy_legacy_status_is_failure(self):
        result = from_payload({"status": False, "message": "Invalid credentials"})

        assert isinstance(result, Failure)
        assert result.message == "Invalid credentials"

    def test_success_field_wins_over_status(self):
        result = from_payload({"success": False, "status": "ok"})

        assert isinstance(result, Failure)

    def test_body_without_flags_is_success(self):
        result = from_payload({"data": {"totalDoctors": 3}})

        assert result.success is True
        assert result.data == {"totalDoctors": 3}

    def test_non_dict_body_becomes_data(self):
        result = from_payload([1, 2, 3], 200)

        assert result.success is True
        assert result.data == [1, 2, 3]


class TestEnvelopeTypes:

    def test_envelopes_are_immutable(self):
        result = Success(data=1)

        with pytest.raises(ValidationError):
            result.data = 2

    def test_failure_never_carries_data(self):
        with pytest.raises(ValidationError):
            Failure(message="x", data={"a": 1})

    def test_requires_approval_defaults_false(self):
        assert Success().requires_approval is False
