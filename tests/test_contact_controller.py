import logging

import pytest

from controller.contact import ContactOp
from error import ResourceNotFoundError
from schema.contact import ContactRequest
from util.logger import setup_logging


def test_submit_echoes_name(session):
    data = ContactRequest(name="Jane", email="jane@x.com", message="Hello")

    result = ContactOp.submit(session, data)

    assert result.message == "Thanks Jane! Your message has been received."
    assert len(ContactOp.list_submissions(session)) == 1


def test_submit_logs_new_id(session, caplog):
    data = ContactRequest(name="Jane", email="jane@x.com", message="secret body")

    with caplog.at_level(logging.INFO, logger="controller.contact"):
        ContactOp.submit(session, data)

    assert "Contact submission 1 received" in caplog.text
    assert "secret body" not in caplog.text


def test_get_missing_submission_raises(session):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        ContactOp.get_submission(session, 7)

    assert exc_info.value.status_code == 404


def test_setup_logging_is_idempotent():
    root = setup_logging()
    handlers = len(root.handlers)

    assert setup_logging() is root
    assert len(root.handlers) == handlers
