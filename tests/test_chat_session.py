# tests/test_chat_session.py

import pytest
from unimatch.core.exceptions import TransportError
from unimatch.core.models import DiagnosticResult
from unimatch.presentation.chat_session import ChatSession, ERROR_ENTRY
from unimatch.presentation.presenter import ResultPresenter

RESULT = DiagnosticResult.model_validate({
    "texto_recibido": "fiebre",
    "enfermedad_detectada": "Flu",
    "nivel_urgencia": "baja",
    "medicamentos_evaluados": [
        {"Medicamento": "Aspirin", "Match": 85.0, "Enfermedad": "Flu"},
        {"Medicamento": "Paracetamol", "Match": 60.0, "Enfermedad": "Flu"},
    ],
})


class StubClient:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.queries = []
        self.session = None

    def submit(self, query):
        self.queries.append(query)
        if self.session is not None:
            assert self.session.send_enabled is False
        if self.error:
            raise self.error
        return self.result


def make_session(client):
    session = ChatSession(client, ResultPresenter(threshold=70))
    client.session = session
    return session


def test_successful_exchange():
    client = StubClient(result=RESULT)
    session = make_session(client)

    added = session.submit("fiebre")

    assert client.queries == ["fiebre"]
    assert [e.title for e in added] == [
        "You", "Received text", "Detected condition", "Urgency level", "Medications not recommended",
    ]
    assert added[0].body == "fiebre"
    assert added[-1].body == "Aspirin (85.0%)"
    assert list(session.messages) == added
    assert session.send_enabled is True


def test_transport_error_appends_error_entry():
    client = StubClient(error=TransportError("Diagnostic service error", {"status_code": 500}))
    session = make_session(client)

    added = session.submit("fiebre")

    assert added[1:] == [ERROR_ENTRY]
    assert session.messages[-1] == ERROR_ENTRY
    assert session.send_enabled is True


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_blank_text_not_submitted(text):
    client = StubClient(result=RESULT)
    session = make_session(client)

    assert session.submit(text) == []
    assert client.queries == []
    assert session.messages == ()


def test_disabled_session_ignores_submit():
    client = StubClient(result=RESULT)
    session = make_session(client)
    session.send_enabled = False

    assert session.submit("fiebre") == []
    assert client.queries == []


def test_log_is_append_only():
    client = StubClient(result=RESULT)
    session = make_session(client)

    first = session.submit("fiebre")
    client.result, client.error = None, TransportError("unreachable")
    second = session.submit("tos")

    assert list(session.messages) == first + second
