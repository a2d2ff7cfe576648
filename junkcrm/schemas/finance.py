from pydantic import BaseModel


class TransactionSummary(BaseModel):
    income: str
    expenses: str
    profit: str
    count: int
