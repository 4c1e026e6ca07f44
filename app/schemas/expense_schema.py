from typing import Annotated, List, Union

from pydantic import AllowInfNan, BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ExpenseCreate(BaseModel):
    # strict: "12.5" is not a number and 1.0 is not an integer; NaN/Infinity are rejected;
    # unknown fields are dropped
    model_config = ConfigDict(strict=True, extra="ignore", allow_inf_nan=False)

    expense: StrictStr
    # an integral amount is echoed back as sent
    expense_amount: Union[StrictInt, Annotated[StrictFloat, AllowInfNan(False)]]
    due_date: Annotated[StrictInt, Field(ge=INT64_MIN, le=INT64_MAX)]


class Expense(BaseModel):
    id: int
    expense: str
    expense_amount: float
    due_date: int

    class Config:
        from_attributes = True


class ExpenseResponse(BaseModel):
    status: int
    data: Expense


class ExpenseListResponse(BaseModel):
    status: int
    data: List[Expense]
