import logging
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.future import select

from giftem.models.db.setting_model import SettingModel

logger = logging.getLogger(__name__)


class SettingsRepository:
    """Repository for key-value blobs in the settings table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, key: str) -> Optional[SettingModel]:
        query = select(SettingModel).where(SettingModel.key == key)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def put(self, key: str, value: Any) -> None:
        db_model = await self.get(key)
        if db_model is None:
            self.db.add(SettingModel(key=key, value=value))
        else:
            db_model.value = value
        await self.db.commit()

    async def delete(self, key: str) -> bool:
        db_model = await self.get(key)
        if db_model is None:
            return False
        await self.db.delete(db_model)
        await self.db.commit()
        return True


class SettingsStore:
    """Local mirror of store state; opens one session per call."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def load(self, key: str) -> Optional[Any]:
        async with self.session_factory() as session:
            db_model = await SettingsRepository(session).get(key)
            if db_model is None:
                return None
            logger.debug("Loaded mirrored state for %r", key)
            return db_model.value

    async def save(self, key: str, value: Any) -> None:
        async with self.session_factory() as session:
            await SettingsRepository(session).put(key, value)

    async def delete(self, key: str) -> bool:
        async with self.session_factory() as session:
            return await SettingsRepository(session).delete(key)
