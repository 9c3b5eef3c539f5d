# SQLAlchemy database models
from .setting_model import SettingModel

__all__ = ["SettingModel"]
