"""SQLAlchemy-backed persistence for transactions and investments."""

from contextlib import contextmanager
import dataclasses

from sqlalchemy import (
    Column,
    Date,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
)
from sqlalchemy.exc import SQLAlchemyError

from finance_tracker.application.ports.database import DatabaseEnginePort
from finance_tracker.application.ports.finance_backend import (
    FinanceBackendPort,
    Record,
)
from finance_tracker.domain.constants import (
    AMOUNT_DIGITS,
    CATEGORY_MAX_LENGTH,
    NAME_MAX_LENGTH,
    OWNER_ID_MAX_LENGTH,
    PRICE_DIGITS,
    SHARES_DIGITS,
    SYMBOL_MAX_LENGTH,
)
from finance_tracker.domain.errors import BackendUnavailableError
from finance_tracker.domain.models import (
    Collection,
    Investment,
    RecordId,
    Transaction,
    TransactionKind,
)
from finance_tracker.infrastructure.logging.logger import get_app_logger
from finance_tracker.utils.decimal_utils import coerce_decimal


metadata = MetaData()

transactions_table = Table(
    "transactions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "owner_id",
        String(OWNER_ID_MAX_LENGTH),
        nullable=False,
        index=True,
    ),
    Column("kind", String(16), nullable=False),
    Column("amount", Numeric(*AMOUNT_DIGITS), nullable=False),
    Column(
        "category",
        String(CATEGORY_MAX_LENGTH),
        nullable=False,
        default="",
    ),
    Column("description", Text, nullable=False, default=""),
    Column("date", Date, nullable=False),
)

investments_table = Table(
    "investments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "owner_id",
        String(OWNER_ID_MAX_LENGTH),
        nullable=False,
        index=True,
    ),
    Column("symbol", String(SYMBOL_MAX_LENGTH), nullable=False),
    Column("name", String(NAME_MAX_LENGTH), nullable=True),
    Column("shares", Numeric(*SHARES_DIGITS), nullable=False),
    Column("purchase_price", Numeric(*PRICE_DIGITS), nullable=False),
    Column("current_price", Numeric(*PRICE_DIGITS), nullable=False),
    Column("purchase_date", Date, nullable=False),
)

_TABLES = {
    Collection.TRANSACTIONS: transactions_table,
    Collection.INVESTMENTS: investments_table,
}


def _transaction_values(record: Transaction) -> dict:
    return {
        "owner_id": record.owner_id,
        "kind": record.kind.value,
        "amount": record.amount,
        "category": record.category,
        "description": record.description,
        "date": record.date,
    }


def _investment_values(record: Investment) -> dict:
    return {
        "owner_id": record.owner_id,
        "symbol": record.symbol,
        "name": record.name,
        "shares": record.shares,
        "purchase_price": record.purchase_price,
        "current_price": record.current_price,
        "purchase_date": record.purchase_date,
    }


def _record_values(collection: Collection, record: Record) -> dict:
    if collection is Collection.TRANSACTIONS:
        return _transaction_values(record)
    return _investment_values(record)


def _transaction_from_row(row) -> Transaction:
    return Transaction(
        id=row.id,
        owner_id=row.owner_id,
        kind=TransactionKind(row.kind),
        amount=coerce_decimal(row.amount),
        category=row.category or "",
        description=row.description or "",
        date=row.date,
    )


def _investment_from_row(row) -> Investment:
    return Investment(
        id=row.id,
        owner_id=row.owner_id,
        symbol=row.symbol,
        name=row.name,
        shares=coerce_decimal(row.shares),
        purchase_price=coerce_decimal(row.purchase_price),
        current_price=coerce_decimal(row.current_price),
        purchase_date=row.purchase_date,
    )


class SqlAlchemyFinanceBackend(FinanceBackendPort):
    """Finance backend storing records in SQL tables scoped by owner."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the backend.

        Args:
            db_port: Port providing access to the finance engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    @contextmanager
    def _translate_errors(self, action: str):
        try:
            yield
        except SQLAlchemyError as exc:
            self._logger.error(f"Database error while trying to {action}: {exc}")
            raise BackendUnavailableError(
                f"Database unavailable while trying to {action}"
            ) from exc
        except RuntimeError as exc:
            # Raised by the engine factory when FINANCE_DB_URL is unset.
            self._logger.error(f"Database not configured to {action}: {exc}")
            raise BackendUnavailableError(
                f"Database not configured while trying to {action}: {exc}"
            ) from exc

    def _decode_rows(self, rows, decoder) -> list:
        try:
            return [decoder(row) for row in rows]
        except (TypeError, ValueError, ArithmeticError) as exc:
            self._logger.error(f"Malformed row in the finance database: {exc}")
            raise BackendUnavailableError(
                "The finance database holds a malformed row"
            ) from exc

    def prepare_schema(self) -> None:
        """Create the finance tables if they do not exist."""
        with self._translate_errors("create the finance tables"):
            engine = self._db_port.get_finance_engine()
            metadata.create_all(engine)

    def list_transactions(self, owner_id: str | None) -> list[Transaction]:
        """Return the owner's transactions, newest first."""
        query = (
            transactions_table.select()
            .where(transactions_table.c.owner_id == owner_id)
            .order_by(
                transactions_table.c.date.desc(),
                transactions_table.c.id.desc(),
            )
        )
        with self._translate_errors("list transactions"):
            engine = self._db_port.get_finance_engine()
            with engine.connect() as conn:
                rows = conn.execute(query).all()
        return self._decode_rows(rows, _transaction_from_row)

    def list_investments(self, owner_id: str | None) -> list[Investment]:
        """Return the owner's investments, newest purchase first."""
        query = (
            investments_table.select()
            .where(investments_table.c.owner_id == owner_id)
            .order_by(
                investments_table.c.purchase_date.desc(),
                investments_table.c.id.desc(),
            )
        )
        with self._translate_errors("list investments"):
            engine = self._db_port.get_finance_engine()
            with engine.connect() as conn:
                rows = conn.execute(query).all()
        return self._decode_rows(rows, _investment_from_row)

    def insert(self, collection: Collection, record: Record) -> Record:
        """Insert a record and return it with the database-generated id."""
        table = _TABLES[collection]
        statement = table.insert().values(**_record_values(collection, record))
        with self._translate_errors(f"insert into {collection.value}"):
            engine = self._db_port.get_finance_engine()
            with engine.begin() as conn:
                result = conn.execute(statement)
                new_id = result.inserted_primary_key[0]
        return dataclasses.replace(record, id=new_id)

    def replace(
        self,
        collection: Collection,
        record_id: RecordId,
        record: Record,
    ) -> bool:
        """Overwrite the owner's record; return False when no row matched."""
        table = _TABLES[collection]
        statement = (
            table.update()
            .where(
                table.c.id == record_id,
                table.c.owner_id == record.owner_id,
            )
            .values(**_record_values(collection, record))
        )
        with self._translate_errors(f"update {collection.value}"):
            engine = self._db_port.get_finance_engine()
            with engine.begin() as conn:
                result = conn.execute(statement)
        return result.rowcount > 0

    def remove(
        self,
        collection: Collection,
        record_id: RecordId,
        owner_id: str | None = None,
    ) -> bool:
        """Delete a record by id; return False when no row matched."""
        table = _TABLES[collection]
        statement = table.delete().where(table.c.id == record_id)
        if owner_id is not None:
            statement = statement.where(table.c.owner_id == owner_id)
        with self._translate_errors(f"delete from {collection.value}"):
            engine = self._db_port.get_finance_engine()
            with engine.begin() as conn:
                result = conn.execute(statement)
        return result.rowcount > 0


__all__ = [
    "SqlAlchemyFinanceBackend",
    "metadata",
    "transactions_table",
    "investments_table",
]
