import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable

from .models import Category, Notification, Transaction
from .settings import Settings


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Store:
    accounts: tuple[str, ...]
    categories: tuple[Category, ...]
    transactions: list[Transaction] = field(default_factory=list)
    budgets: dict[str, float] = field(default_factory=dict)
    notifications: list[Notification] = field(default_factory=list)
    clock: Callable[[], datetime] = utc_now
    lock: object = field(default_factory=threading.RLock, repr=False)

    def has_account(self, account) -> bool:
        return account in self.accounts

    def find_category(self, name) -> Category | None:
        return next((c for c in self.categories if c.name == name), None)

    def budget_for(self, account: str) -> float | None:
        return self.budgets.get(account)

    def set_budget(self, account: str, budget: float) -> None:
        self.budgets[account] = budget

    def add_transaction(self, txn: Transaction) -> None:
        self.transactions.append(txn)

    def add_notification(self, notification: Notification) -> None:
        self.notifications.append(notification)


def init_store(
    settings: Settings, *, clock: Callable[[], datetime] = utc_now
) -> Store:
    return Store(
        accounts=tuple(settings.accounts),
        categories=tuple(settings.categories),
        clock=clock,
    )
