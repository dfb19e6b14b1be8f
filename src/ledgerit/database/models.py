"""SQLAlchemy models for ledgerit database."""

from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    Date,
    Boolean,
    Index,
    create_engine,
    event,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()

# Seconds a SQLite connection waits on a locked database before failing.
SQLITE_BUSY_TIMEOUT = 30


class Account(Base):
    """Ledger account model. The ID encodes the account type's range."""

    __tablename__ = "account"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(140), nullable=False)
    type = Column(String, nullable=False)
    archived = Column(Boolean, default=False, nullable=False)
    confidential = Column(Boolean, default=False, nullable=False)

    # Relationships
    entries = relationship("Entry", back_populates="account")
    statement_entries = relationship("BankStatementEntry", back_populates="account_ref")


class Batch(Base):
    """Batch model grouping journals posted together."""

    __tablename__ = "batch"

    id = Column(Integer, primary_key=True)
    date = Column(Date, nullable=False)

    # Relationships
    journals = relationship("Journal", back_populates="batch")


class Journal(Base):
    """Journal model. One balanced transaction."""

    __tablename__ = "journal"

    id = Column(Integer, primary_key=True)
    batch_id = Column(Integer, ForeignKey("batch.id"), nullable=True)
    unstructured_narrative = Column(String(140), nullable=False, default="")

    # Relationships
    batch = relationship("Batch", back_populates="journals")
    entries = relationship("Entry", back_populates="journal", order_by="Entry.id")


class Entry(Base):
    """Entry model. Positive amounts are debits, negative amounts are credits."""

    __tablename__ = "entry"

    id = Column(Integer, primary_key=True)
    journal_id = Column(Integer, ForeignKey("journal.id"), nullable=False)
    account_id = Column(Integer, ForeignKey("account.id"), nullable=False)
    amount = Column(Integer, nullable=False)

    __table_args__ = (Index("ix_entry_account_journal", "account_id", "journal_id"),)

    # Relationships
    journal = relationship("Journal", back_populates="entries")
    account = relationship("Account", back_populates="entries")


class BankStatementEntry(Base):
    """Bank statement line model."""

    __tablename__ = "bank_statement_entry"

    id = Column(Integer, primary_key=True)
    account = Column(Integer, ForeignKey("account.id"), nullable=False)
    amt = Column(Integer, nullable=False)
    unstructured_narrative = Column(String(140), nullable=False, default="")
    date = Column(Date, nullable=True)

    # Relationships
    account_ref = relationship("Account", back_populates="statement_entries")


class Setting(Base):
    """Named integer or string setting."""

    __tablename__ = "settings"

    name = Column(String, primary_key=True)
    int_value = Column("intValue", Integer, nullable=True)
    str_value = Column("strValue", String, nullable=True)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(database_url: str) -> Engine:
    """Create a SQLAlchemy engine, configuring SQLite connections."""
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            echo=False,
            connect_args={"timeout": SQLITE_BUSY_TIMEOUT, "check_same_thread": False},
        )
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        return engine
    return create_engine(database_url, echo=False)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create the tables if needed and return a SQLAlchemy session factory."""
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, expire_on_commit=False)
