from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from pluginhub.db.models import SystemPluginCustomization
from pluginhub.domain.entities import CustomizationRecord


class CustomizationRepository:
    """Repository for system plugin customization records."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_customization(
        self, plugin_id: str, associated_plugin_id: str
    ) -> Optional[CustomizationRecord]:
        """
        Find the record linking a system plugin to its backing team app.

        Args:
            plugin_id: Registry plugin ID
            associated_plugin_id: App ID the registry entry declares

        Returns:
            The customization record if both IDs match, None otherwise
        """
        result = await self.db.execute(
            select(SystemPluginCustomization).where(
                SystemPluginCustomization.plugin_id == plugin_id,
                SystemPluginCustomization.associated_plugin_id == associated_plugin_id,
            )
        )
        row = result.scalar_one_or_none()
        if not row:
            return None
        return CustomizationRecord(
            plugin_id=row.plugin_id,
            associated_plugin_id=row.associated_plugin_id,
        )
