"""
Test configuration and fixtures for pluginhub tests.
"""
import datetime

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from pluginhub.main import app
from pluginhub.db.database import get_db
from pluginhub.db.models import Base, App, AppVersion, SystemPluginCustomization
from pluginhub.dependencies import get_system_plugin_registry
from pluginhub.registry import SystemPluginRegistry


def make_node(node_type: str, node_id: str = None, **extra) -> dict:
    """Build a raw workflow node."""
    return {"node_id": node_id or f"{node_type}-node", "flow_node_type": node_type, "name": node_type, **extra}


PLUGIN_NODES = [
    make_node(
        "pluginInput",
        inputs=[
            {"key": "query", "label": "Query", "value_type": "string", "render_type_list": ["reference"]},
            {"key": "limit", "label": "Limit", "value_type": "number", "render_type_list": ["numberInput", "reference"], "default_value": 5},
        ],
    ),
    make_node("httpRequest468"),
    make_node(
        "pluginOutput",
        inputs=[{"key": "result", "label": "Result", "value_type": "string"}],
    ),
]

PLAIN_NODES = [make_node("workflowStart"), make_node("chatNode")]

CHAT_CONFIG = {
    "variables": [
        {"key": "lang", "label": "Language", "type": "select", "required": True,
         "enums": [{"value": "en"}, {"value": "fr"}]},
    ],
}

LINKED_APP_ID = "64f1a2b3c4d5e6f708192a3b"
PERSONAL_APP_ID = "64f1c0ffee0000000000beef"

REGISTRY_ENTRIES = [
    {
        "id": "commercial-weather-tool",
        "name": "Weather",
        "avatar": "weather.svg",
        "intro": "Current weather",
        "template_type": "tools",
        "version": "1.0.0",
        "current_cost": 0.5,
        "workflow": {
            "nodes": [make_node("tool", inputs=[{"key": "city"}], outputs=[{"key": "forecast"}],
                                tool_config={"name": "weather"})],
            "edges": [],
        },
    },
    {
        "id": "commercial-licensed-search",
        "name": "Licensed Search",
        "avatar": "search.svg",
        "intro": "Search via a team workflow",
        "template_type": "search",
        "has_token_fee": True,
        "associated_plugin_id": LINKED_APP_ID,
    },
]


@pytest.fixture
def registry():
    """A small in-memory system plugin registry."""
    return SystemPluginRegistry(REGISTRY_ENTRIES)


@pytest_asyncio.fixture
async def db_session():
    """Create an in-memory test database session."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def seeded_session(db_session):
    """Database with a personal plugin app and the app backing the licensed search plugin."""
    base_time = datetime.datetime(2024, 1, 1)
    db_session.add_all([
        App(id=PERSONAL_APP_ID, team_id="team-1", tmb_id="tmb-1", name="My Plugin",
            avatar="mine.svg", intro="Personal plugin", nodes=PLAIN_NODES, edges=[],
            chat_config={}, plugin_node_version=None),
        AppVersion(id="v-old", app_id=PERSONAL_APP_ID, version_name="v1", nodes=PLAIN_NODES,
                   edges=[], chat_config=CHAT_CONFIG, is_publish=True, created_at=base_time),
        AppVersion(id="v-new", app_id=PERSONAL_APP_ID, version_name="v2", nodes=PLUGIN_NODES,
                   edges=[{"source": "pluginInput-node", "target": "pluginOutput-node"}],
                   chat_config={}, is_publish=True, created_at=base_time + datetime.timedelta(days=1)),
        AppVersion(id="v-draft", app_id=PERSONAL_APP_ID, version_name="draft", nodes=[],
                   edges=[], chat_config={}, is_publish=False, created_at=base_time + datetime.timedelta(days=2)),
        App(id=LINKED_APP_ID, team_id="team-licensed", tmb_id="tmb-licensed", name="Search backend",
            avatar="backend.svg", intro="", nodes=PLUGIN_NODES, edges=[], chat_config={},
            plugin_node_version=None),
        AppVersion(id="v-search", app_id=LINKED_APP_ID, version_name="v1", nodes=PLUGIN_NODES,
                   edges=[], chat_config={}, is_publish=True, created_at=base_time),
        SystemPluginCustomization(plugin_id="commercial-licensed-search", associated_plugin_id=LINKED_APP_ID),
    ])
    await db_session.commit()
    return db_session


@pytest_asyncio.fixture
async def client(seeded_session, registry):
    """Create test client bound to the seeded database and the test registry."""
    async def override_get_db():
        yield seeded_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_system_plugin_registry] = lambda: registry
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
