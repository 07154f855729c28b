"""데이터베이스 패키지"""

from .mysql_connection import (
    Base,
    configure_engine,
    get_engine,
    get_mysql_session,
    init_mysql_db,
    test_mysql_connection,
    dispose_engine,
)

__all__ = [
    'Base', 'configure_engine', 'get_engine', 'get_mysql_session',
    'init_mysql_db', 'test_mysql_connection', 'dispose_engine'
]
