import uuid

import structlog

from .models import Notification
from .store import Store


logger = structlog.get_logger(__name__)


def check_and_notify(store: Store, account: str, amount: float) -> Notification | None:
    """Record a notification if posting ``amount`` would exceed the account budget.

    Only prior positive amounts count as spend. Must run before the new
    transaction is appended to the store.
    """
    budget = store.budget_for(account)
    if budget is None:
        return None

    total_spent = sum(
        t.amount for t in store.transactions if t.account == account and t.amount > 0
    )
    if total_spent + amount <= budget:
        return None

    notification = Notification(
        id=str(uuid.uuid4()),
        account=account,
        message=f"Budget exceeded for {account}!",
        timestamp=store.clock(),
    )
    store.add_notification(notification)
    logger.warning(
        "budget_exceeded",
        account=account,
        budget=budget,
        total_spent=total_spent,
        amount=amount,
    )
    return notification
