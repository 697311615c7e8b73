from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from pluginhub.db.models import AppVersion as AppVersionRow
from pluginhub.domain.entities import AppDocument, AppVersion


def version_to_entity(version: AppVersionRow, app: Optional[AppDocument] = None) -> AppVersion:
    return AppVersion(
        version_id=version.id,
        version_name=version.version_name,
        nodes=list(version.nodes or []),
        edges=list(version.edges or []),
        chat_config=dict(version.chat_config or (app or {}).get("chat_config") or {}),
    )


class AppVersionRepository:
    """Repository for app version history."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_latest_version(self, app_id: str, app: Optional[AppDocument] = None) -> AppVersion:
        """
        Get the newest published version of an app.

        Args:
            app_id: App ID
            app: The app document, used when nothing has been published

        Returns:
            The latest version, or the app's own graph whose version id is the
            app's plugin node version (possibly None)
        """
        result = await self.db.execute(
            select(AppVersionRow)
            .where(AppVersionRow.app_id == app_id, AppVersionRow.is_publish.is_(True))
            .order_by(AppVersionRow.created_at.desc())
            .limit(1)
        )
        version = result.scalar_one_or_none()
        if version:
            return version_to_entity(version, app)

        app = app or {}
        return AppVersion(
            version_id=app.get("plugin_node_version"),
            version_name=app.get("name"),
            nodes=list(app.get("nodes") or []),
            edges=list(app.get("edges") or []),
            chat_config=dict(app.get("chat_config") or {}),
        )

    async def get_version_by_id(
        self, app_id: str, version_id: Optional[str] = None, app: Optional[AppDocument] = None
    ) -> AppVersion:
        """
        Get a specific version of an app.

        Args:
            app_id: App ID
            version_id: Version ID (optional)
            app: The app document

        Returns:
            The matching version, or the latest version when version_id is
            missing or does not belong to the app
        """
        if version_id:
            result = await self.db.execute(
                select(AppVersionRow).where(
                    AppVersionRow.id == version_id, AppVersionRow.app_id == app_id
                )
            )
            version = result.scalar_one_or_none()
            if version:
                return version_to_entity(version, app)

        return await self.get_latest_version(app_id, app)
