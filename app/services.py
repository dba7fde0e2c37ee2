import uuid

import structlog

from .logic import (
    parse_report_date,
    resolve_category,
    validate_account,
    validate_amount,
    validate_budget,
)
from .models import Notification, Transaction
from .monitor import check_and_notify
from .store import Store


logger = structlog.get_logger(__name__)


def add_transaction(
    store: Store,
    *,
    account,
    amount: float,
    category,
    subcategory: str | None = None,
    description: str | None = None,
) -> Transaction:
    with store.lock:
        valid_account = validate_account(store, account)
        resolved = resolve_category(store, category, subcategory)
        valid_amount = validate_amount(amount)

        check_and_notify(store, valid_account, valid_amount)

        txn = Transaction(
            id=str(uuid.uuid4()),
            amount=valid_amount,
            account=valid_account,
            category=resolved.name,
            subcategory=subcategory or None,
            description=description or "",
            date=store.clock(),
        )
        store.add_transaction(txn)

    logger.info(
        "transaction_added",
        transaction_id=txn.id,
        account=txn.account,
        category=txn.category,
        amount=txn.amount,
    )
    return txn


def set_budget(store: Store, *, account, budget: float) -> tuple[str, float]:
    with store.lock:
        valid_account = validate_account(store, account)
        valid_budget = validate_budget(budget)
        store.set_budget(valid_account, valid_budget)

    logger.info("budget_set", account=valid_account, budget=valid_budget)
    return valid_account, valid_budget


def generate_report(store: Store, *, start_date, end_date) -> list[Transaction]:
    """Transactions created between two calendar dates, both inclusive."""
    start = parse_report_date(start_date)
    end = parse_report_date(end_date)
    with store.lock:
        return [t for t in store.transactions if start <= t.date.date() <= end]


def get_summary(store: Store) -> dict[str, float]:
    summary: dict[str, float] = {}
    with store.lock:
        for t in store.transactions:
            summary[t.category] = summary.get(t.category, 0) + t.amount
    return summary


def list_notifications(store: Store) -> list[Notification]:
    with store.lock:
        return list(store.notifications)
