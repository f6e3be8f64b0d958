from decimal import Decimal
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import CurrentUser, Role
from app.db.base import Base, get_db
from app.db.models import line_items, transactions, treatment_categories, treatments  # noqa: F401
from app.db.models.treatments import Treatment
from app.main import app


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def admin():
    return CurrentUser(id=uuid4(), role=Role.ADMIN)


@pytest.fixture
def employee():
    return CurrentUser(id=uuid4(), role=Role.EMPLOYEE)


def auth_headers(user: CurrentUser) -> dict:
    return {"X-User-Id": str(user.id), "X-User-Role": user.role.value}


@pytest.fixture
def make_treatment(db):
    async def _make(name, price, discount_active=False, discount_percentage=None, is_active=True):
        treatment = Treatment(
            name=name,
            price=Decimal(str(price)),
            discount_active=discount_active,
            discount_percentage=(
                Decimal(str(discount_percentage)) if discount_percentage is not None else None
            ),
            is_active=is_active,
        )
        db.add(treatment)
        await db.commit()
        await db.refresh(treatment)
        return treatment

    return _make
