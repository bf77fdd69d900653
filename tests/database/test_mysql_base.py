import mysql.connector
import pytest
from mysql.connector import errorcode

from workspace_attendance.core.exceptions import DuplicateEntry, StoreUnavailable
from workspace_attendance.database.mysql_base import db_cursor


class _Cursor:
    def __init__(self, error):
        self._error = error
        self.closed = False

    def execute(self, sql, params=None):
        raise self._error

    def close(self):
        self.closed = True


class _Connection:
    def __init__(self, error):
        self.cursor_obj = _Cursor(error)
        self.rolled_back = False
        self.committed = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self.cursor_obj

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class _Factory:
    def __init__(self, error):
        self.conn = _Connection(error)

    def connect(self):
        return self.conn


def _run(factory):
    with db_cursor(factory) as (_, cur):
        cur.execute("INSERT INTO special_days VALUES (...)")


def test_duplicate_key_maps_to_duplicate_entry():
    factory = _Factory(mysql.connector.IntegrityError(msg="Duplicate entry", errno=errorcode.ER_DUP_ENTRY))

    with pytest.raises(DuplicateEntry):
        _run(factory)
    assert factory.conn.rolled_back
    assert not factory.conn.committed
    assert factory.conn.closed


def test_other_integrity_errors_are_store_failures():
    factory = _Factory(mysql.connector.IntegrityError(msg="Cannot be null", errno=errorcode.ER_BAD_NULL_ERROR))

    with pytest.raises(StoreUnavailable):
        _run(factory)


def test_driver_errors_map_to_store_unavailable():
    factory = _Factory(mysql.connector.OperationalError(msg="Lost connection", errno=errorcode.CR_SERVER_LOST))

    with pytest.raises(StoreUnavailable):
        _run(factory)
    assert factory.conn.rolled_back
