# unimatch/api/routes/chat.py

from fastapi import APIRouter, Depends

from unimatch.core.models import ChatRequest, ChatResponse
from unimatch.integrations.diagnostic_client import DiagnosticClient
from unimatch.presentation.chat_session import ChatSession

router = APIRouter(prefix="/api/v1", tags=["v1"])


def get_diagnostic_client() -> DiagnosticClient:
    return DiagnosticClient()


@router.post("/chat", response_model=ChatResponse)
def chat(req: ChatRequest, client: DiagnosticClient = Depends(get_diagnostic_client)):
    """
    One chat exchange:
      - echo the user's text
      - query the diagnostic service
      - render the diagnosis, or the fixed error entry if the service failed
    Blank text is rejected with 422 before the service is called.
    """
    session = ChatSession(client)
    entries = session.submit(req.text)
    return ChatResponse(entries=entries)
