from typing import List, Optional
from pydantic import BaseModel


class EstimateRequest(BaseModel):
    tier: Optional[str] = None  # "1/8", "1/4", "1/2" or "Full"
    surcharges: List[str] = []


class EstimateResponse(BaseModel):
    total: str  # Fixed-point, two fraction digits
