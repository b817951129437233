"""Defines the :class:`.NamedStore` persistence class."""

from __future__ import annotations

# Standard Library Imports
from contextlib import contextmanager
from traceback import format_exc
from typing import TYPE_CHECKING

# Third Party Imports
from sqlalchemy import create_engine, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Local Imports
from ..common.behavioral_config import BehavioralConfig
from ..common.exceptions import NamedStoreError
from ..common.logger import Logger
from .named_value import NamedValue
from .table_base import Base

if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Iterator

    # Third Party Imports
    from sqlalchemy.orm import Session


class NamedStore:
    """String values persisted by name, scoped under a fixed name prefix.

    Two stores sharing a database but using different prefixes never see each other's values.
    """

    SQLITE_PREFIX = "sqlite://"

    def __init__(self, db_path=None, prefix=None, logger=None, verbose_echo=False):
        """Create the backing database tables if needed.

        Args:
            db_path (``str``, optional): SQLAlchemy-accepted string denoting what database
                implementation to use and where the database is located. Defaults to the
                configured ``database.DatabasePath``.
            prefix (``str``, optional): scope for every key of this store. Defaults to the
                configured ``database.NamePrefix``.
            logger (:class:`.Logger`, optional): Previously instantiated logging object to use.
                Defaults to ``None``, resulting in a new :class:`.Logger` instance.
            verbose_echo (``bool``, optional): Flag that if set ``True``, will tell the SQLAlchemy
                engine to output the raw SQL statements it runs. Defaults to ``False``.
        """
        config = BehavioralConfig.getConfig()
        if not db_path:
            db_path = config.database.DatabasePath
        if not prefix:
            prefix = config.database.NamePrefix

        self.prefix: str = prefix
        self.logger = logger
        if self.logger is None:
            self.logger = Logger("fabletime", path=config.logging.OutputLocation)

        if db_path.startswith(self.SQLITE_PREFIX):
            # In-memory SQLite must share one connection, otherwise every session sees an empty DB
            self.engine = create_engine(
                db_path,
                echo=verbose_echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            self.engine = create_engine(db_path, echo=verbose_echo)

        Base.metadata.create_all(self.engine, checkfirst=True)
        self.session_factory = sessionmaker(bind=self.engine)
        self.logger.debug(f"Named store {prefix!r} at: {db_path}")

    @contextmanager
    def _getSessionScope(self, **kwargs) -> Iterator[Session]:
        """Provide a transactional scope around a series of operations.

        Args:
            kwargs (``dict``): optional arguments to pass to `Session` factory

        Yields:
            :class:`sqlalchemy.orm.session.Session`: establishes all conversations with DB
        """
        current_session = self.session_factory(**kwargs)
        try:
            yield current_session
            current_session.commit()
        except SQLAlchemyError as err:
            self.logger.error(
                f"Exception thrown in `::getSessionScope()` by {self}: \n{format_exc()}",
            )
            current_session.rollback()
            raise NamedStoreError(f"Named store {self.prefix!r} transaction failed") from err
        finally:
            current_session.close()

    def getNamed(self, key: str) -> str | None:
        """Return the value stored under `key`, or ``None`` if absent."""
        query = select(NamedValue.value).where(
            NamedValue.prefix == self.prefix,
            NamedValue.name == key,
        )
        with self._getSessionScope() as session:
            return session.execute(query).scalar_one_or_none()

    def hasNamed(self, key: str) -> bool:
        """Return whether a value is stored under `key`."""
        return self.getNamed(key) is not None

    def setNamed(self, key: str, value: str) -> None:
        """Store `value` under `key`, replacing any previous value."""
        if not isinstance(value, str):
            msg = f"[NamedStore.setNamed()] value must be a `str`, not {type(value)!r}"
            self.logger.error(msg)
            raise TypeError(value)

        with self._getSessionScope() as session:
            session.merge(NamedValue(prefix=self.prefix, name=key, value=value))

    def deleteNamed(self, key: str) -> bool:
        """Remove the value stored under `key`.

        Returns:
            ``bool``: whether a value was removed.
        """
        query = delete(NamedValue).where(
            NamedValue.prefix == self.prefix,
            NamedValue.name == key,
        )
        with self._getSessionScope() as session:
            return session.execute(query).rowcount > 0

    def listNamed(self, startswith: str = "") -> list[str]:
        """Return the sorted keys of this store that begin with `startswith`."""
        query = (
            select(NamedValue.name)
            .where(
                NamedValue.prefix == self.prefix,
                NamedValue.name.startswith(startswith, autoescape=True),
            )
            .order_by(NamedValue.name)
        )
        with self._getSessionScope() as session:
            return list(session.execute(query).scalars())

    def resetData(self) -> int:
        """Remove every value stored under this store's prefix.

        Returns:
            ``int``: number of values removed.
        """
        query = delete(NamedValue).where(NamedValue.prefix == self.prefix)
        with self._getSessionScope() as session:
            count = session.execute(query).rowcount
        self.logger.warning(f"Dropped {count} named values under {self.prefix!r}")
        return count

    def __repr__(self) -> str:
        """."""
        return f"NamedStore(prefix={self.prefix!r}, url={self.engine.url!s})"
