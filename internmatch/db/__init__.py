"""
Database module - PostgreSQL and MongoDB connections.
"""
from internmatch.db.postgres import get_db_session, init_postgres_schema, test_postgres_connection
from internmatch.db.mongodb import get_mongo_db, init_mongo_indexes, test_mongo_connection

__all__ = [
    "get_db_session",
    "init_postgres_schema",
    "test_postgres_connection",
    "get_mongo_db",
    "init_mongo_indexes",
    "test_mongo_connection"
]
