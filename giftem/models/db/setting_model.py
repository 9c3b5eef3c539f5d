from sqlalchemy import JSON, Column, DateTime, String, func

from giftem.database import Base


class SettingModel(Base):
    """SQLAlchemy model for the settings table (key-value blobs)."""

    __tablename__ = "settings"

    key = Column(String(255), primary_key=True)
    value = Column(JSON, nullable=True)
    updated_at = Column(
        DateTime(timezone=True), default=func.now(), onupdate=func.now()
    )
