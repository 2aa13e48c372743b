from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, PlainSerializer

# Decimal amounts go over the wire as JSON numbers, not strings
Money = Annotated[
    Decimal,
    PlainSerializer(lambda v: float(v), return_type=float, when_used="json"),
]


class ErrorOut(BaseModel):
    error: str


class HealthOut(BaseModel):
    status: str = "healthy"
