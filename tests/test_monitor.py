from datetime import datetime, timezone

from app.models import Transaction
from app.monitor import check_and_notify
from app.settings import Settings
from app.store import init_store


NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def _txn(account, amount, n=0):
    return Transaction(
        id=f"t{n}",
        amount=amount,
        account=account,
        category="Food",
        subcategory=None,
        description="",
        date=NOW,
    )


def test_no_budget_means_no_notification():
    store = init_store(Settings(), clock=lambda: NOW)

    assert check_and_notify(store, "Cash", 10_000) is None
    assert store.notifications == []


def test_notifies_when_candidate_pushes_spend_over_budget():
    store = init_store(Settings(), clock=lambda: NOW)
    store.set_budget("Cash", 100)
    store.add_transaction(_txn("Cash", 60))

    notification = check_and_notify(store, "Cash", 50)

    assert notification is not None
    assert store.notifications == [notification]
    assert notification.account == "Cash"
    assert notification.message == "Budget exceeded for Cash!"
    assert notification.timestamp == NOW


def test_exactly_reaching_budget_does_not_notify():
    store = init_store(Settings(), clock=lambda: NOW)
    store.set_budget("Cash", 100)
    store.add_transaction(_txn("Cash", 60))

    assert check_and_notify(store, "Cash", 40) is None
    assert store.notifications == []


def test_refunds_and_other_accounts_are_not_spend():
    store = init_store(Settings(), clock=lambda: NOW)
    store.set_budget("Cash", 100)
    store.add_transaction(_txn("Cash", 90, 1))
    store.add_transaction(_txn("Cash", -80, 2))
    store.add_transaction(_txn("Bank Account", 500, 3))

    # spend is 90, refund ignored
    assert check_and_notify(store, "Cash", 20) is not None
    assert check_and_notify(store, "Cash", 5) is None
    assert len(store.notifications) == 1
