import math
import re
from datetime import date

from .errors import (
    InvalidAccount,
    InvalidAmount,
    InvalidBudget,
    InvalidCategory,
    MissingDateRange,
)
from .models import Category
from .store import Store


REPORT_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def validate_account(store: Store, account) -> str:
    if not store.has_account(account):
        raise InvalidAccount()
    return account


def resolve_category(store: Store, name, subcategory=None) -> Category:
    category = store.find_category(name)
    if category is None:
        raise InvalidCategory()
    if subcategory and subcategory not in category.subcategories:
        raise InvalidCategory()
    return category


def validate_amount(amount) -> float:
    if not isinstance(amount, (int, float)) or not math.isfinite(amount):
        raise InvalidAmount()
    return amount


def validate_budget(budget) -> float:
    if not isinstance(budget, (int, float)) or not math.isfinite(budget) or budget <= 0:
        raise InvalidBudget()
    return budget


def parse_report_date(s) -> date:
    if not isinstance(s, str) or not REPORT_DATE_RE.fullmatch(s.strip()):
        raise MissingDateRange()
    try:
        return date.fromisoformat(s.strip())
    except ValueError as e:
        raise MissingDateRange() from e
