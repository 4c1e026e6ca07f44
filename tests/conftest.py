import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from app.database.connection import Base
from app.main import create_app
from app.models.model import Expense
from app.repositories.settings import Settings


def make_engine(create_tables: bool = True):
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    if create_tables:
        Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def engine():
    engine = make_engine()
    yield engine
    engine.dispose()


@pytest.fixture
def client(settings, engine):
    with TestClient(create_app(settings=settings, engine=engine)) as client:
        yield client


@pytest.fixture
def add_expenses(engine):
    def _add(*rows):
        with Session(engine) as db:
            for expense_id, expense, amount, due_date in rows:
                db.add(Expense(id=expense_id, expense=expense, expense_amount=amount, due_date=due_date))
            db.commit()

    return _add


@pytest.fixture
def client_without_tables(settings):
    engine = make_engine(create_tables=False)
    with TestClient(create_app(settings=settings, engine=engine)) as client:
        yield client


@pytest.fixture
def persisting_client(settings, engine):
    settings.EXPENSE_CREATE_PERSISTS = True
    with TestClient(create_app(settings=settings, engine=engine)) as client:
        yield client
