from pluginhub.db.models import Base
from pluginhub.db.database import init_db, close_db, get_db

__all__ = ['Base', 'init_db', 'close_db', 'get_db']
