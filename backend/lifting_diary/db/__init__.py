from lifting_diary.db.session import async_session_maker, get_db, init_db
from lifting_diary.db.base import Base

__all__ = ["Base", "async_session_maker", "get_db", "init_db"]
