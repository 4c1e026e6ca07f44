from sqlalchemy import BigInteger, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database.connection import Base


class Expense(Base):
    __tablename__ = "expenses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    expense: Mapped[str] = mapped_column(String, nullable=False)
    # unscaled, amounts are stored as sent
    expense_amount: Mapped[float] = mapped_column(Numeric(asdecimal=False), nullable=False)
    # opaque date code (e.g. 20240101), stored and returned verbatim
    due_date: Mapped[int] = mapped_column(BigInteger, nullable=False)
