# unimatch/integrations/diagnostic_client.py

import logging
from typing import Optional

import requests
from pydantic import ValidationError

from unimatch.core import config
from unimatch.core.exceptions import TransportError
from unimatch.core.models import DiagnosisRequest, DiagnosticResult

logger = logging.getLogger(__name__)


class DiagnosticClient:
    """
    Thin wrapper around the diagnostic service's POST /diagnostico endpoint.
    One call per submit(), no retries. Every failure (connection, status,
    JSON, schema) surfaces as TransportError.
    """

    HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}

    def __init__(self, endpoint: Optional[str] = None, timeout: Optional[float] = None):
        self.endpoint = endpoint or config.DIAGNOSTIC_API_URL
        self.timeout = timeout if timeout is not None else config.DIAGNOSTIC_API_TIMEOUT

    def submit(self, query: str) -> DiagnosticResult:
        """
        Send one query and parse the reply. The caller guarantees the query
        is not blank.
        """
        payload = DiagnosisRequest(text=query).model_dump(by_alias=True)
        logger.info("POST %s (%d chars)", self.endpoint, len(query))

        try:
            r = requests.post(self.endpoint, json=payload, headers=self.HEADERS, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Diagnostic service unreachable: %s", e)
            raise TransportError("Diagnostic service unreachable", {"endpoint": self.endpoint}) from e

        if not r.ok:
            # body is not inspected on failure
            logger.warning("Diagnostic service returned %s", r.status_code)
            raise TransportError("Diagnostic service error", {"status_code": r.status_code})

        try:
            body = r.json()
        except ValueError as e:
            logger.warning("Diagnostic service returned a non-JSON body")
            raise TransportError("Malformed response body") from e

        try:
            result = DiagnosticResult.model_validate(body)
        except ValidationError as e:
            logger.warning("Diagnostic response failed schema validation: %s", e.error_count())
            raise TransportError("Malformed response body", {"errors": e.error_count()}) from e

        logger.info(
            "Diagnosis received: condition=%s urgency=%s medications=%d",
            result.detected_condition, result.urgency_level, len(result.medications),
        )
        return result
