from pydantic import BaseModel, Field


class Aggregate(BaseModel):
    total_students: int = 0
    total_fee: float = 0.0
    total_paid: float = 0.0
    total_remaining: float = 0.0


class Summary(Aggregate):
    total_fee_display: str = Field(..., description="Total fee, e.g. $250.00")
    total_paid_display: str
    total_remaining_display: str
