"""
Unit tests for the logging configuration.
"""

import logging

from authsession.logging_config import CredentialRedactionFilter, get_logging_config


def make_record(msg, *args):
    return logging.LogRecord("authsession.test", logging.INFO, __file__, 1, msg, args, None)


def test_bearer_token_is_masked():
    record = make_record("GET /auth/check-token headers=%s", {"Authorization": "Bearer abc.def.ghi"})

    assert CredentialRedactionFilter().filter(record) is True
    assert "abc.def.ghi" not in record.getMessage()
    assert "Bearer ***" in record.getMessage()


def test_password_is_masked():
    record = make_record("login body: %s", {"email": "a@b.com", "password": "hunter2"})

    CredentialRedactionFilter().filter(record)

    message = record.getMessage()
    assert "hunter2" not in message
    assert "a@b.com" in message


def test_clean_message_is_untouched():
    record = make_record("Session authenticated for user id %s", 7)

    CredentialRedactionFilter().filter(record)

    assert record.args == (7,)
    assert record.getMessage() == "Session authenticated for user id 7"


def test_logging_config_structure():
    config = get_logging_config("DEBUG")

    assert config["version"] == 1
    assert config["loggers"]["authsession"]["level"] == "DEBUG"
    assert "credential_filter" in config["handlers"]["default"]["filters"]
    assert config["filters"]["credential_filter"]["()"] is CredentialRedactionFilter
