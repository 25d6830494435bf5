# entity tests

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from domain.entities import Transaction, TransactionType, User
from infrastructure.db.models import UserModel
from infrastructure.db.models.transactions import to_storage_time, from_storage_time


def test_transaction_entity_create():
    transaction = Transaction.create(user_id=1, type="withdraw", amount=Decimal("12.30"))
    assert transaction.id is None
    assert transaction.user_id == 1
    assert transaction.type == TransactionType.WITHDRAW
    assert transaction.amount == Decimal("12.30")
    assert transaction.time.tzinfo is not None


def test_transaction_entity_rejects_unknown_type():
    with pytest.raises(ValueError):
        Transaction.create(user_id=1, type="transfer", amount=Decimal("1"))


def test_transaction_type_values():
    assert [t.value for t in TransactionType] == ["deposit", "withdraw"]


@pytest.mark.parametrize("balance, amount, expected", [
    ("100.00", "99.99", True),
    ("100.00", "100.00", True),
    ("100.00", "100.01", False),
])
def test_user_can_withdraw(balance, amount, expected):
    assert User(id=1, balance=Decimal(balance)).can_withdraw(Decimal(amount)) is expected


def test_storage_time_keeps_the_instant():
    time = datetime(2024, 6, 30, 23, 59, 59, tzinfo=timezone.utc)

    stored = to_storage_time(time)

    assert stored.tzinfo is None
    assert from_storage_time(stored) == time


def test_user_model_from_domain_keeps_id_and_balance():
    model = UserModel.from_domain(User(id=7, balance=Decimal("12.34")))

    assert (model.id, model.balance) == (7, Decimal("12.34"))
    assert model.to_domain() == User(id=7, balance=Decimal("12.34"))
