import logging
from typing import List

from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, NoResultFound, SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors.errors import (
    DuplicateConflictError,
    InternalError,
    InvalidInputError,
    NotFoundError,
)
from app.models.model import Expense
from app.schemas import expense_schema

logger = logging.getLogger(__name__)


def get_expenses(db: Session) -> List[expense_schema.Expense]:
    try:
        rows = db.query(Expense).order_by(Expense.id.desc()).all()
    except SQLAlchemyError as e:
        # a query that cannot run is reported as "nothing to find", not as a server fault
        logger.error(f"Failed to query expenses: {e}")
        raise NotFoundError() from e

    try:
        return [expense_schema.Expense.model_validate(row) for row in rows]
    except ValidationError as e:
        logger.error(f"Failed to decode expense row: {e}")
        raise InvalidInputError() from e


def get_expense_by_id(db: Session, expense_id: int) -> expense_schema.Expense:
    try:
        row = db.query(Expense).filter(Expense.id == expense_id).one()
        return expense_schema.Expense.model_validate(row)
    except NoResultFound as e:
        raise NotFoundError() from e
    except (SQLAlchemyError, ValidationError) as e:
        logger.error(f"Failed to fetch expense {expense_id}: {e}")
        raise InvalidInputError() from e


def create_expense(db: Session, expense: expense_schema.ExpenseCreate) -> expense_schema.Expense:
    db_expense = Expense(
        expense=expense.expense,
        expense_amount=expense.expense_amount,
        due_date=expense.due_date,
    )
    try:
        db.add(db_expense)
        db.commit()
        db.refresh(db_expense)
    except IntegrityError as e:
        db.rollback()
        logger.error(f"Expense violates a table constraint: {e}")
        raise DuplicateConflictError() from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create expense: {e}")
        raise InternalError() from e

    return expense_schema.Expense.model_validate(db_expense)
