# unimatch/core/models.py

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr, field_validator
from typing import List, Tuple


# ===== DIAGNOSTIC SERVICE WIRE SCHEMA =====

class DiagnosisRequest(BaseModel):
    text: str = Field(..., alias="texto", description="Free-text symptom description")

    model_config = ConfigDict(populate_by_name=True)


class MedicationEvaluation(BaseModel):
    # strict: "85", "1e2" or true are shape errors, not scores; ints still pass
    name: StrictStr = Field(..., alias="Medicamento")
    match_percent: StrictFloat = Field(..., alias="Match")
    associated_condition: StrictStr = Field(..., alias="Enfermedad")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class DiagnosticResult(BaseModel):
    received_text: StrictStr = Field(..., alias="texto_recibido")
    detected_condition: StrictStr = Field(..., alias="enfermedad_detectada")
    urgency_level: StrictStr = Field(..., alias="nivel_urgencia")
    medications: Tuple[MedicationEvaluation, ...] = Field(..., alias="medicamentos_evaluados")

    # the service also sends softmax/huggingface diagnostics we never render
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


# ===== CHAT SCHEMA =====

class DisplayEntry(BaseModel):
    title: str
    body: str

    model_config = ConfigDict(frozen=True)


class ChatRequest(BaseModel):
    text: str = Field(..., alias="texto", description="Symptoms typed by the user")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("texto must not be empty")
        return v


class ChatResponse(BaseModel):
    entries: List[DisplayEntry]
