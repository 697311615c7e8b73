from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from pluginhub.db.models import App
from pluginhub.domain.entities import AppDocument


def app_to_document(app: App) -> AppDocument:
    return AppDocument(
        id=app.id,
        team_id=app.team_id,
        tmb_id=app.tmb_id,
        name=app.name,
        avatar=app.avatar or "",
        intro=app.intro or "",
        nodes=list(app.nodes or []),
        edges=list(app.edges or []),
        chat_config=dict(app.chat_config or {}),
        plugin_node_version=app.plugin_node_version,
    )


class AppRepository:
    """Repository for team-owned app documents."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_app_by_id(self, app_id: str) -> Optional[AppDocument]:
        """
        Get an app document by ID.

        Args:
            app_id: App ID

        Returns:
            App document if found, None otherwise
        """
        result = await self.db.execute(select(App).where(App.id == app_id))
        app = result.scalar_one_or_none()
        return app_to_document(app) if app else None
