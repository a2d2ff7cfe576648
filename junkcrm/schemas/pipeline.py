from typing import Literal
from pydantic import BaseModel


class LeadMove(BaseModel):
    # +1 moves toward Won/Lost, -1 back toward New
    direction: Literal[1, -1]
