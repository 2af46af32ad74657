# unimatch/presentation/chat_session.py
from __future__ import annotations
import logging
from typing import List, Optional, Sequence

from unimatch.core.exceptions import TransportError
from unimatch.core.models import DisplayEntry
from unimatch.integrations.diagnostic_client import DiagnosticClient
from unimatch.presentation.presenter import ResultPresenter
from unimatch.utils.helpers import is_blank

logger = logging.getLogger(__name__)

USER_TITLE = "You"
ERROR_ENTRY = DisplayEntry(title="Error", body="Could not connect to the diagnostic service")


class ChatSession:
    """
    State owned by one chat window: the append-only message log and
    whether the send action is enabled.

    Only one submission runs at a time. Sending is disabled while a request
    is in flight and re-enabled when it finishes, whatever the outcome.
    """

    def __init__(self, client: Optional[DiagnosticClient] = None,
                 presenter: Optional[ResultPresenter] = None):
        self.client = client or DiagnosticClient()
        self.presenter = presenter or ResultPresenter()
        self._messages: List[DisplayEntry] = []
        self.send_enabled = True

    @property
    def messages(self) -> Sequence[DisplayEntry]:
        return tuple(self._messages)

    def submit(self, text: str) -> List[DisplayEntry]:
        """
        Run one exchange for `text` and return the entries it appended.
        Blank text, or a submit while another is in flight, is a no-op.
        """
        if is_blank(text) or not self.send_enabled:
            return []

        user_entry = DisplayEntry(title=USER_TITLE, body=text)
        self._messages.append(user_entry)

        self.send_enabled = False
        try:
            result = self.client.submit(text)
            rendered = self.presenter.present(result)
        except TransportError as e:
            logger.warning("Submission failed: %s", e)
            rendered = [ERROR_ENTRY]
        finally:
            self.send_enabled = True

        self._messages.extend(rendered)
        return [user_entry, *rendered]
