from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PaymentMethod(str, Enum):
    CASH = "cash"
    CARD = "card"
    DIGITAL = "digital"


class Payment(BaseModel):
    """Payment for a completed ride. The amount is frozen at processing time."""

    method: PaymentMethod
    amount: int = Field(ge=0)
    processed_at: datetime

    model_config = ConfigDict(frozen=True)
