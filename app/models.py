from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Category:
    id: int
    name: str
    subcategories: tuple[str, ...]


@dataclass(frozen=True)
class Transaction:
    id: str
    amount: float
    account: str
    category: str
    subcategory: str | None
    description: str
    date: datetime


@dataclass(frozen=True)
class Notification:
    id: str
    account: str
    message: str
    timestamp: datetime
