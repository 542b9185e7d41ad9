import pytest

from config.settings import mask_sensitive_data

pytestmark = pytest.mark.unit


class TestSensitiveDataMasking:
    def test_email_masked_in_log_output(self):
        event_dict = {"event": "customer.created", "email": "ana@example.com"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "ana@example.com" not in result["email"]
        assert "***MASKED***" in result["email"]

    def test_email_inside_message_masked(self):
        event_dict = {"event": "test", "error": "Key (email)=(ana@example.com) exists"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "ana@example.com" not in result["error"]

    def test_password_masked_in_log_output(self):
        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked_in_log_output(self):
        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    def test_non_sensitive_data_unchanged(self):
        event_dict = {"event": "order.created", "order_id": "0190a1b2", "quantity": 3}
        result = mask_sensitive_data(None, None, event_dict)
        assert result == {"event": "order.created", "order_id": "0190a1b2", "quantity": 3}
