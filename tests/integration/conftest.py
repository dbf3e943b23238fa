import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from src.depends import get_session
from src.domain.character import Character, CharacterStatus

OFFICER_HEADERS = {"X-Actor-Id": "officer_1", "X-Actor-Role": "officer"}

# name, owner account, class, status
CENSUS = [
    ("Azrosaurus", "acct-a", "Warlock", CharacterStatus.MAIN),
    ("Azroalt", "acct-a", "Cleric", CharacterStatus.ALT),
    ("Bravado", "acct-b", "Warrior", CharacterStatus.MAIN),
    ("Celestia", "acct-c", "Enchanter", CharacterStatus.MAIN),
    ("Drifter", None, "Rogue", CharacterStatus.MAIN),
]


@pytest_asyncio.fixture(scope="function")
async def engine():
    """Create an in-memory SQLite engine shared by every session of the test"""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        echo=False,
        future=True,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test, with the census seeded"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        for name, owner, character_class, status in CENSUS:
            session.add(
                Character(
                    name=name,
                    owner_account_id=owner,
                    character_class=character_class,
                    level=60,
                    status=status,
                )
            )
        await session.commit()
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    """Create test client with database session override"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    # Override the session dependency to use test session
    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test", headers=OFFICER_HEADERS
    ) as ac:
        yield ac
