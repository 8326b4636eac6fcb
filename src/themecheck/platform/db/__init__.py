"""Option storage backends: SQLite and in-memory."""

from .db_manager import DatabaseManager
from .memory_options import InMemoryOptionStore
from .options_dao import OptionsDAO

__all__ = ["DatabaseManager", "InMemoryOptionStore", "OptionsDAO"]
