import logging
import re

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from app.database.connection import get_db
from app.errors.errors import InvalidInputError
from app.repositories import expense_crud
from app.schemas import expense_schema, general_schema
from app.schemas.expense_schema import INT64_MAX, INT64_MIN
from app.utils.logging_config import request_context

logger = logging.getLogger(__name__)

expense_Router = APIRouter(prefix="/expense")

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": general_schema.ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": general_schema.ErrorResponse},
}


def parse_expense_id(raw_id: str | None) -> int:
    """Parse a path id as a signed 64-bit integer.

    A missing id and an unparsable one are the same error to the caller.
    """
    if not raw_id or not _INTEGER_RE.fullmatch(raw_id):
        raise InvalidInputError()
    expense_id = int(raw_id)
    if not INT64_MIN <= expense_id <= INT64_MAX:
        raise InvalidInputError()
    return expense_id


@expense_Router.get(
    "/",
    response_model=expense_schema.ExpenseListResponse,
    responses=ERROR_RESPONSES,
    tags=["expenses"],
)
def get_expenses(request: Request, db: Session = Depends(get_db)):
    logger.info(f"Fetching all expenses: {request_context(request)}")

    expenses = expense_crud.get_expenses(db=db)

    logger.info(
        f"Expenses fetched successfully: {request_context(request)} status={status.HTTP_200_OK} count={len(expenses)}"
    )
    return {"status": status.HTTP_200_OK, "data": expenses}


@expense_Router.post("/", responses=ERROR_RESPONSES, tags=["expenses"])
def create_expense(
    request: Request,
    expense: expense_schema.ExpenseCreate,
    db: Session = Depends(get_db),
):
    logger.info(
        f"Expense data received: {request_context(request)} expense={expense.expense!r} "
        f"amount={expense.expense_amount} due_date={expense.due_date}"
    )

    if request.app.state.settings.EXPENSE_CREATE_PERSISTS:
        data = expense_crud.create_expense(db=db, expense=expense)
        logger.info(f"Expense created successfully: {request_context(request)} id={data.id}")
    else:
        # nothing is written; the parsed body is echoed back
        data = expense
        logger.info(f"Expense accepted without persisting: {request_context(request)}")

    return {"status": "success", "data": data}


@expense_Router.get("//", responses=ERROR_RESPONSES, tags=["expenses"])
def get_expense_without_id(request: Request):
    # /expense// carries an empty id segment
    logger.info(f"Fetching expense by ID: {request_context(request)} id=''")
    parse_expense_id("")


@expense_Router.get(
    "/{expense_id}/",
    response_model=expense_schema.ExpenseResponse,
    responses=ERROR_RESPONSES,
    tags=["expenses"],
)
def get_expense(expense_id: str, request: Request, db: Session = Depends(get_db)):
    logger.info(f"Fetching expense by ID: {request_context(request)} id={expense_id!r}")

    parsed_id = parse_expense_id(expense_id)
    expense = expense_crud.get_expense_by_id(db=db, expense_id=parsed_id)

    logger.info(
        f"Expense fetched successfully: {request_context(request)} status={status.HTTP_200_OK} "
        f"id={parsed_id} expense={expense.expense!r}"
    )
    return {"status": status.HTTP_200_OK, "data": expense}
