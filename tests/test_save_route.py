# This project was developed with assistance from AI tools.
"""Tests for POST /saveLoanApplication with the writer mocked out."""

import logging

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from portal_api.core.config import settings
from portal_api.main import app
from portal_api.routes import loan_application
from portal_api.routes.loan_application import SAVE_FAILED
from portal_api.services.writer import PersistenceError, TransactionFailure
from portal_db.models import Borrower, Liability, LoanApplication, SubjectProperty

from .forms import JANE_DOE_FORM, LOAN_AMOUNT_ONLY_FORM
from .personas import JANE_USER_ID


def _written_graph(mock_writer):
    mock_writer.write.assert_awaited_once()
    return mock_writer.write.await_args.args[0]


def test_save_returns_application_id(save_client, mock_writer):
    resp = save_client.post("/saveLoanApplication", data=JANE_DOE_FORM)

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "applicationId": 7}

    graph = _written_graph(mock_writer)
    assert graph.count(Borrower) == 1
    assert graph.count(Liability) == 1
    assert graph.of_type(LoanApplication)[0].values["user_id"] == JANE_USER_ID


def test_save_without_name_stores_application_only(save_client, mock_writer):
    resp = save_client.post("/saveLoanApplication", data=LOAN_AMOUNT_ONLY_FORM)

    assert resp.json()["success"] is True
    graph = _written_graph(mock_writer)
    assert [node.model for node in graph] == [LoanApplication, SubjectProperty]


def test_save_failure_returns_generic_error(save_client, mock_writer):
    """Storage errors answer 200 with success=false and no internal detail."""
    mock_writer.write.side_effect = TransactionFailure("duplicate key value violates constraint")

    resp = save_client.post("/saveLoanApplication", data=JANE_DOE_FORM)

    assert resp.status_code == 200
    assert resp.json() == {"success": False, "error": SAVE_FAILED}
    assert "constraint" not in resp.text


def test_save_failure_is_logged(save_client, mock_writer, caplog):
    mock_writer.write.side_effect = PersistenceError("boom")

    with caplog.at_level(logging.ERROR, logger="portal_api.routes.loan_application"):
        save_client.post("/saveLoanApplication", data=JANE_DOE_FORM)

    assert "save failed" in caplog.text
    assert JANE_USER_ID in caplog.text


def test_unexpected_error_returns_generic_error(save_client, mock_writer, caplog):
    """A non-persistence error still answers with the failure body, not a 500."""
    mock_writer.write.side_effect = OperationalError("COMMIT", {}, Exception("server closed"))

    with caplog.at_level(logging.ERROR, logger="portal_api.routes.loan_application"):
        resp = save_client.post("/saveLoanApplication", data=JANE_DOE_FORM)

    assert resp.status_code == 200
    assert resp.json() == {"success": False, "error": SAVE_FAILED}
    assert "server closed" not in resp.text
    assert "save failed" in caplog.text


def test_builder_error_returns_generic_error(save_client, mock_writer, monkeypatch):
    def explode(*args, **kwargs):
        raise ValueError("bad graph")

    monkeypatch.setattr(loan_application, "build_application_graph", explode)

    resp = save_client.post("/saveLoanApplication", data=JANE_DOE_FORM)

    assert resp.json() == {"success": False, "error": SAVE_FAILED}
    mock_writer.write.assert_not_awaited()


def test_truncated_multipart_body_is_not_saved(save_client, mock_writer):
    resp = save_client.post(
        "/saveLoanApplication",
        content=b"--x\r\nbroken",
        headers={"content-type": "multipart/form-data; boundary=x"},
    )

    assert resp.status_code == 200
    assert resp.json() == {"success": False, "error": SAVE_FAILED}
    mock_writer.write.assert_not_awaited()


def test_empty_body_is_not_saved(save_client, mock_writer):
    resp = save_client.post("/saveLoanApplication")

    assert resp.json() == {"success": False, "error": SAVE_FAILED}
    mock_writer.write.assert_not_awaited()


def test_attachments_without_fields_are_not_saved(save_client, mock_writer):
    files = [("loanDocs", ("w2.pdf", b"%PDF-1.4 fake", "application/pdf"))]

    resp = save_client.post("/saveLoanApplication", files=files)

    assert resp.json()["success"] is False
    mock_writer.write.assert_not_awaited()


def test_uploaded_files_are_ignored(save_client, mock_writer):
    files = [
        ("loanDocs", ("w2.pdf", b"%PDF-1.4 fake", "application/pdf")),
        ("loanDocs", ("paystub.pdf", b"%PDF-1.4 fake", "application/pdf")),
    ]

    resp = save_client.post("/saveLoanApplication", data=JANE_DOE_FORM, files=files)

    assert resp.json()["success"] is True
    graph = _written_graph(mock_writer)
    assert graph.count(Liability) == 1


def test_unrecognized_code_policy_comes_from_settings(save_client, mock_writer, monkeypatch):
    monkeypatch.setattr(settings, "UNRECOGNIZED_CODE_POLICY", "flag")
    form = {**JANE_DOE_FORM, "accountType2c1": "Payday Loan"}

    save_client.post("/saveLoanApplication", data=form)

    liability = _written_graph(mock_writer).of_type(Liability)[0]
    assert liability.values["account_type"] == "Unrecognized"


def test_save_requires_authentication(monkeypatch):
    """Without a token the RFC 7807 problem body comes back with 401."""
    monkeypatch.setattr(settings, "AUTH_DISABLED", False)

    resp = TestClient(app).post("/saveLoanApplication", data=JANE_DOE_FORM)

    assert resp.status_code == 401
    body = resp.json()
    assert body["title"] == "Unauthorized"
    assert body["status"] == 401
    assert body["detail"] == "Missing authentication token"


def test_error_body_echoes_request_id(monkeypatch):
    monkeypatch.setattr(settings, "AUTH_DISABLED", False)

    resp = TestClient(app).get("/api/applications/", headers={"x-request-id": "req-123"})

    assert resp.status_code == 401
    assert resp.json()["request_id"] == "req-123"
