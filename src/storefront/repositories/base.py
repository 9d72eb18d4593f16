from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Optional, List, Any, Dict
from contextlib import contextmanager
from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from storefront.core.exceptions import ConflictError, DatabaseError
import logging

T = TypeVar('T')

logger = logging.getLogger(__name__)

Params = Optional[Dict[str, Any]]


class BaseRepository(ABC, Generic[T]):
    """
    Shared plumbing for the storefront repositories.

    Every statement is parameterised and runs on its own connection, so each
    call is one atomic unit. Multi-statement units go through transaction().
    Unique and foreign key violations surface as ConflictError, everything
    else the driver raises as DatabaseError.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    @contextmanager
    def get_db_connection(self):
        """Checked-out connection, returned to the pool on exit"""
        try:
            conn = self.engine.connect()
        except SQLAlchemyError as e:
            logger.error(f"Could not connect to the store: {str(e)}")
            raise DatabaseError(f"Database connection failed: {str(e)}", "CONNECT")
        with conn:
            yield conn

    @contextmanager
    def transaction(self):
        """
        Run several statements as one unit: commit when the block exits
        normally, roll back on any exception.
        """
        try:
            with self.engine.begin() as conn:
                yield conn
        except IntegrityError as e:
            logger.error(f"Constraint violation, transaction rolled back: {str(e)}")
            raise ConflictError("Resource conflict")
        except SQLAlchemyError as e:
            logger.error(f"Transaction rolled back: {str(e)}")
            raise DatabaseError(f"Transaction failed: {str(e)}", "TRANSACTION")

    def execute_query(self, query: str, params: Params = None) -> List[Dict[str, Any]]:
        """
        Run a SELECT and return every row as a plain dict.

        Raises:
            DatabaseError: the driver rejected the statement
        """
        try:
            with self.get_db_connection() as conn:
                result = conn.execute(text(query), params or {})
                return [dict(row._mapping) for row in result]
        except SQLAlchemyError as e:
            logger.error(f"SELECT failed: {query.strip()} ({str(e)})")
            raise DatabaseError("Query execution failed", "SELECT")

    def execute_single_query(self, query: str, params: Params = None) -> Optional[Dict[str, Any]]:
        """First row as a dict, or None"""
        try:
            with self.get_db_connection() as conn:
                row = conn.execute(text(query), params or {}).first()
                return dict(row._mapping) if row else None
        except SQLAlchemyError as e:
            logger.error(f"SELECT failed: {query.strip()} ({str(e)})")
            raise DatabaseError("Single query execution failed", "SELECT")

    def execute_command(self, command: str, params: Params = None) -> int:
        """Run an INSERT/UPDATE/DELETE, commit, and return the affected row count"""
        try:
            with self.get_db_connection() as conn:
                result = conn.execute(text(command), params or {})
                conn.commit()
                return result.rowcount
        except IntegrityError as e:
            logger.error(f"Constraint violation: {command.strip()} ({str(e)})")
            raise ConflictError("Resource conflict")
        except SQLAlchemyError as e:
            logger.error(f"Write failed: {command.strip()} ({str(e)})")
            raise DatabaseError("Command execution failed", "WRITE")

    def execute_scalar(self, query: str, params: Params = None) -> Any:
        """First column of the first row (rates, counts, existence checks)"""
        try:
            with self.get_db_connection() as conn:
                return conn.execute(text(query), params or {}).scalar()
        except SQLAlchemyError as e:
            logger.error(f"Scalar SELECT failed: {query.strip()} ({str(e)})")
            raise DatabaseError("Scalar query execution failed", "SELECT")

    def execute_insert_returning_id(
        self,
        command: str,
        params: Params = None,
        conn: Optional[Connection] = None,
    ) -> int:
        """
        Run an INSERT and return the new row's id.

        Pass `conn` to take part in an open transaction() instead of
        committing on a fresh connection; errors are then mapped by
        transaction() itself.
        """
        statement = text(command.rstrip() + " RETURNING id")
        if conn is not None:
            return conn.execute(statement, params or {}).scalar()

        try:
            with self.get_db_connection() as own_conn:
                new_id = own_conn.execute(statement, params or {}).scalar()
                own_conn.commit()
                return new_id
        except IntegrityError as e:
            logger.error(f"Constraint violation on insert: {command.strip()} ({str(e)})")
            raise ConflictError("Resource conflict")
        except SQLAlchemyError as e:
            logger.error(f"Insert failed: {command.strip()} ({str(e)})")
            raise DatabaseError("Insert execution failed", "INSERT")

    @abstractmethod
    def get_by_id(self, entity_id: int) -> Optional[T]:
        """Get entity by ID"""
        pass

    def exists(self, entity_id: int) -> bool:
        query = f"SELECT 1 FROM {self.table_name} WHERE id = :id"
        return self.execute_scalar(query, {"id": entity_id}) is not None

    @property
    @abstractmethod
    def table_name(self) -> str:
        """Table name for the entity"""
        pass
