from datetime import timedelta

import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from src.depends import get_unit_of_work
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Membership, MembershipRole, Team, TeamLink, User


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def seeded_directory(db_session, test_data):
    """Insert teams and users from test_data.json, keyed by email"""
    now = utcnow()

    teams = {}
    for name in test_data.team_names():
        team = Team(name=name)
        db_session.add(team)
        teams[name] = team
    await db_session.flush()

    users = {}
    for entry in test_data.users():
        hours_ago = entry["last_login_hours_ago"]
        user = User(
            name=entry["name"],
            email=entry["email"],
            last_login_at=None if hours_ago is None else now - timedelta(hours=hours_ago),
        )
        db_session.add(user)
        await db_session.flush()

        for membership in entry["memberships"]:
            db_session.add(
                Membership(
                    user_id=user.id,
                    role=MembershipRole(membership["role"]),
                    is_guest=membership["is_guest"],
                )
            )
        for team_name in entry["teams"]:
            db_session.add(TeamLink(user_id=user.id, team_id=teams[team_name].id))
            await db_session.flush()

        users[user.email] = user

    await db_session.commit()
    return users


@pytest_asyncio.fixture
async def client(db_session):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
