import os
from dataclasses import dataclass

from .models import Category


DEFAULT_ACCOUNTS = ("Bank Account", "Mobile Money", "Cash")
DEFAULT_CATEGORIES = (
    Category(id=1, name="Food", subcategories=("Groceries", "Dining")),
    Category(id=2, name="Transport", subcategories=("Fuel", "Public Transport")),
)


@dataclass(frozen=True)
class Settings:
    accounts: tuple[str, ...] = DEFAULT_ACCOUNTS
    categories: tuple[Category, ...] = DEFAULT_CATEGORIES
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"


def get_settings() -> Settings:
    return Settings(
        host=os.environ.get("FINANCE_HOST", "127.0.0.1"),
        port=int(os.environ.get("FINANCE_PORT", "3000")),
        log_level=os.environ.get("FINANCE_LOG_LEVEL", "INFO").upper(),
    )
