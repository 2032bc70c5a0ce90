"""
In-process database handle.

The whole database lives in memory (SQLite ``:memory:``). It is read in full
from a single file at startup and written back in full by ``checkpoint``.
There is no journal between checkpoints: mutations made after the last
checkpoint are lost if the process dies without running shutdown.
"""
import logging
import os
import sqlite3
import tempfile
import threading
from contextlib import closing, contextmanager

from jobly.errors import (
    ConstraintViolationError,
    HandleClosedError,
    QuerySyntaxError,
    StorageCorruptError,
)

logger = logging.getLogger(__name__)


@contextmanager
def _translate_errors(sql):
    """Map sqlite3 exceptions onto the application's error taxonomy."""
    try:
        yield
    except sqlite3.IntegrityError as e:
        raise ConstraintViolationError(str(e)) from e
    except (sqlite3.OperationalError, sqlite3.ProgrammingError) as e:
        logger.error("Statement failed: %s (%s)", e, " ".join(sql.split()))
        raise QuerySyntaxError(str(e)) from e
    except sqlite3.DatabaseError as e:
        raise StorageCorruptError(str(e)) from e


class DatabaseHandle:
    """Owns the single live database instance of the process.

    All primitives hold a re-entrant lock for their whole duration, and
    ``transaction()`` holds it across every statement of the block, so one
    handle can be shared by the request threads of a threaded server.
    """

    def __init__(self, conn, existed=False):
        self._conn = conn
        self._lock = threading.RLock()
        self._depth = 0
        self.existed = existed
        self.lastrowid = None

    @classmethod
    def load(cls, path):
        """Deserialize the image at ``path`` or start an empty database.

        An existing file that is empty or not a valid SQLite image raises
        ``StorageCorruptError``; it is never replaced by a fresh database.
        """
        conn = sqlite3.connect(":memory:", check_same_thread=False, isolation_level=None)
        conn.row_factory = sqlite3.Row

        if path is None or not os.path.exists(path):
            # writes page 1 so an untouched database still serializes
            conn.execute("PRAGMA user_version = 0")
            logger.info("New in-memory database created.")
            return cls(conn, existed=False)

        with open(path, "rb") as f:
            image = f.read()

        try:
            if not image:
                raise sqlite3.DatabaseError("file is empty")
            conn.deserialize(image)
            # deserialize is lazy; force the header and schema to be parsed
            conn.execute("SELECT count(*) FROM sqlite_master").fetchone()
            (status,) = conn.execute("PRAGMA quick_check").fetchone()
            if status != "ok":
                raise sqlite3.DatabaseError(status)
        except sqlite3.DatabaseError as e:
            conn.close()
            logger.error("Refusing to open %s: %s", path, e)
            raise StorageCorruptError(f"{path} is not a readable database image") from e

        logger.info("Database loaded from %s", path)
        return cls(conn, existed=True)

    @property
    def lock(self):
        return self._lock

    @property
    def closed(self):
        return self._conn is None

    def _connection(self):
        if self._conn is None:
            raise HandleClosedError()
        return self._conn

    def query(self, sql, params=()):
        """Run a read statement and return every row as a dict."""
        with self._lock, _translate_errors(sql):
            conn = self._connection()
            with closing(conn.execute(sql, params)) as cursor:
                return [dict(row) for row in cursor.fetchall()]

    def query_one(self, sql, params=()):
        rows = self.query(sql, params)
        return rows[0] if rows else None

    def execute(self, sql, params=()):
        """Run a mutating statement; return the affected-row count."""
        with self._lock, _translate_errors(sql):
            conn = self._connection()
            with closing(conn.execute(sql, params)) as cursor:
                self.lastrowid = cursor.lastrowid
                return cursor.rowcount

    def insert(self, sql, params=()):
        """Run an INSERT and return the id of the new row."""
        with self._lock:
            self.execute(sql, params)
            return self.lastrowid

    def executescript(self, script):
        with self._lock, _translate_errors(script):
            self._connection().executescript(script)

    @contextmanager
    def transaction(self):
        """Group statements into one unit: commit on success, roll back on error.

        Nested blocks join the outermost transaction.
        """
        with self._lock:
            conn = self._connection()
            if self._depth:
                self._depth += 1
                try:
                    yield self
                finally:
                    self._depth -= 1
                return

            with _translate_errors("BEGIN"):
                conn.execute("BEGIN")
            self._depth = 1
            try:
                yield self
            except BaseException:
                if self._conn is not None and conn.in_transaction:
                    conn.execute("ROLLBACK")
                raise
            else:
                with _translate_errors("COMMIT"):
                    conn.execute("COMMIT")
            finally:
                self._depth = 0

    def export(self):
        """Return the full database image as bytes."""
        with self._lock, _translate_errors("serialize"):
            return bytes(self._connection().serialize())

    def checkpoint(self, path):
        """Write the full image to ``path``, replacing whatever was there."""
        with self._lock:
            image = self.export()
            directory = os.path.dirname(os.path.abspath(path))
            fd, tmp_path = tempfile.mkstemp(prefix=".jobly-", suffix=".tmp", dir=directory)
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(image)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_path, path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
        logger.info("Database saved to %s (%d bytes)", path, len(image))

    def close(self):
        with self._lock:
            if self._conn is None:
                return
            self._conn.close()
            self._conn = None
        logger.info("Database handle closed.")

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
