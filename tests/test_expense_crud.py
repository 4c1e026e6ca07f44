"""
Tests for the expense repository, including failure mapping with a mocked session.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, NoResultFound, OperationalError
from sqlalchemy.orm import Session

from app.errors.errors import (
    DuplicateConflictError,
    InternalError,
    InvalidInputError,
    NotFoundError,
)
from app.repositories import expense_crud
from app.schemas import expense_schema


def _row(**overrides):
    values = {"id": 1, "expense": "coffee", "expense_amount": 4.5, "due_date": 20240101}
    values.update(overrides)
    return SimpleNamespace(**values)


def _mock_session():
    return MagicMock(spec=Session)


class TestGetExpenses:
    def test_returns_decoded_rows(self, engine, add_expenses) -> None:
        add_expenses((1, "coffee", 4.50, 20240101), (2, "rent", 1200.00, 20240105))

        with Session(engine) as db:
            expenses = expense_crud.get_expenses(db)

        assert expenses == [
            expense_schema.Expense(id=2, expense="rent", expense_amount=1200.0, due_date=20240105),
            expense_schema.Expense(id=1, expense="coffee", expense_amount=4.5, due_date=20240101),
        ]

    def test_execution_failure_is_not_found(self) -> None:
        db = _mock_session()
        db.query.return_value.order_by.return_value.all.side_effect = OperationalError("SELECT", {}, Exception("down"))

        with pytest.raises(NotFoundError):
            expense_crud.get_expenses(db)

    def test_one_bad_row_fails_the_whole_list(self) -> None:
        db = _mock_session()
        db.query.return_value.order_by.return_value.all.return_value = [_row(id=2), _row(id=1, expense=None)]

        with pytest.raises(InvalidInputError):
            expense_crud.get_expenses(db)

    def test_row_without_id_is_rejected(self) -> None:
        db = _mock_session()
        db.query.return_value.order_by.return_value.all.return_value = [_row(id=None)]

        with pytest.raises(InvalidInputError):
            expense_crud.get_expenses(db)


class TestGetExpenseById:
    def test_returns_matching_row(self, engine, add_expenses) -> None:
        add_expenses((1, "coffee", 4.50, 20240101), (2, "rent", 1200.00, 20240105))

        with Session(engine) as db:
            expense = expense_crud.get_expense_by_id(db, 2)

        assert expense == expense_schema.Expense(id=2, expense="rent", expense_amount=1200.0, due_date=20240105)

    def test_absent_row_is_not_found(self, engine) -> None:
        with Session(engine) as db, pytest.raises(NotFoundError):
            expense_crud.get_expense_by_id(db, 999)

    def test_no_result_from_driver_is_not_found(self) -> None:
        db = _mock_session()
        db.query.return_value.filter.return_value.one.side_effect = NoResultFound()

        with pytest.raises(NotFoundError):
            expense_crud.get_expense_by_id(db, 1)

    def test_execution_failure_is_invalid_input(self) -> None:
        db = _mock_session()
        db.query.return_value.filter.return_value.one.side_effect = OperationalError("SELECT", {}, Exception("down"))

        with pytest.raises(InvalidInputError):
            expense_crud.get_expense_by_id(db, 1)

    def test_mistyped_column_is_invalid_input(self) -> None:
        db = _mock_session()
        db.query.return_value.filter.return_value.one.return_value = _row(due_date="tomorrow")

        with pytest.raises(InvalidInputError):
            expense_crud.get_expense_by_id(db, 1)


class TestCreateExpense:
    def test_assigns_id(self, engine) -> None:
        body = expense_schema.ExpenseCreate(expense="lunch", expense_amount=12.5, due_date=20240110)

        with Session(engine) as db:
            first = expense_crud.create_expense(db, body)
            second = expense_crud.create_expense(db, body)

        assert first == expense_schema.Expense(id=1, expense="lunch", expense_amount=12.5, due_date=20240110)
        assert second.id == 2

    def test_integrity_error_is_duplicate_conflict(self) -> None:
        db = _mock_session()
        db.commit.side_effect = IntegrityError("INSERT", {}, Exception("duplicate key"))
        body = expense_schema.ExpenseCreate(expense="lunch", expense_amount=12.5, due_date=20240110)

        with pytest.raises(DuplicateConflictError):
            expense_crud.create_expense(db, body)
        db.rollback.assert_called_once()

    def test_other_store_error_is_internal(self) -> None:
        db = _mock_session()
        db.commit.side_effect = OperationalError("INSERT", {}, Exception("down"))
        body = expense_schema.ExpenseCreate(expense="lunch", expense_amount=12.5, due_date=20240110)

        with pytest.raises(InternalError):
            expense_crud.create_expense(db, body)
        db.rollback.assert_called_once()
