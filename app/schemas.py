from pydantic import BaseModel, Field


class TransactionIn(BaseModel):
    account: str | None = None
    amount: float = Field(allow_inf_nan=False)
    category: str | None = None
    subcategory: str | None = None
    description: str | None = None


class BudgetIn(BaseModel):
    account: str | None = None
    budget: float = Field(allow_inf_nan=False)
