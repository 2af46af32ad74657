# unimatch/presentation/presenter.py
from __future__ import annotations
from typing import List, Optional

from unimatch.core import config
from unimatch.core.models import DiagnosticResult, DisplayEntry, MedicationEvaluation
from unimatch.utils.helpers import format_percent

RECEIVED_TITLE = "Received text"
CONDITION_TITLE = "Detected condition"
URGENCY_TITLE = "Urgency level"
MEDICATIONS_TITLE = "Medications not recommended"


def format_medication(med: MedicationEvaluation) -> str:
    return f"{med.name} ({format_percent(med.match_percent)})"


class ResultPresenter:
    """
    Turns a DiagnosticResult into the entries shown in the chat log.
    Pure: reads the result, never mutates it, performs no I/O.
    """

    def __init__(self, threshold: Optional[float] = None):
        self.threshold = config.MATCH_THRESHOLD if threshold is None else threshold

    @property
    def none_found_message(self) -> str:
        return f"No medications found with a match above {self.threshold:g}%"

    def filter_medications(self, result: DiagnosticResult) -> List[MedicationEvaluation]:
        """
        Medications strictly above the threshold and scored against the
        detected condition (exact match), in their original order.
        """
        return [
            m for m in result.medications
            if m.match_percent > self.threshold
            and m.associated_condition == result.detected_condition
        ]

    def present(self, result: DiagnosticResult) -> List[DisplayEntry]:
        entries = [
            DisplayEntry(title=RECEIVED_TITLE, body=result.received_text),
            DisplayEntry(title=CONDITION_TITLE, body=result.detected_condition),
            DisplayEntry(title=URGENCY_TITLE, body=result.urgency_level),
        ]

        lines = [format_medication(m) for m in self.filter_medications(result)]
        body = "\n".join(lines) if lines else self.none_found_message
        entries.append(DisplayEntry(title=MEDICATIONS_TITLE, body=body))
        return entries
