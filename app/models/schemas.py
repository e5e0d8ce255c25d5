from datetime import date
from typing import Any, Literal

from pydantic import BaseModel, Field


class AddTransactionCommand(BaseModel):
    action: Literal["add_tx"]
    tipo: Literal["expense", "income"]
    desc: str
    val: float = Field(ge=0)
    cat: str
    data: date


class AddRecurringCommand(BaseModel):
    action: Literal["add_rec"]
    desc: str
    val: float
    dia: int = Field(ge=1, le=31)


class AssistantRequest(BaseModel):
    text: str
    categories: list[str] = []


class AssistantResult(BaseModel):
    status_code: int
    body: Any = None
