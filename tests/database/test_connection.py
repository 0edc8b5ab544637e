from __future__ import annotations

import threading

import mysql.connector

from daily_checkin.database.connection import DBConfig, DatabaseConnection
from daily_checkin.database.mysql_base import db_cursor

CONFIG = DBConfig.from_dict({"host": "db", "port": "3307", "user": "app", "password": "pw", "database": "checkin"})


class FakeConnection:
    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.closed = False

    def cursor(self, dictionary=True):
        return FakeCursor()

    def commit(self):
        pass

    def rollback(self):
        pass

    def close(self):
        self.closed = True


class FakeCursor:
    def execute(self, sql, params=None):
        pass

    def close(self):
        pass


def test_connect_uses_configured_target(monkeypatch):
    monkeypatch.setattr(mysql.connector, "connect", lambda **kw: FakeConnection(**kw))

    conn = DatabaseConnection(CONFIG).connect()

    assert conn.kwargs == {"host": "db", "port": 3307, "user": "app", "password": "pw", "database": "checkin"}


def test_parallel_operations_each_get_their_own_connection(monkeypatch):
    opened: list[FakeConnection] = []
    lock = threading.Lock()

    def connect(**kw):
        conn = FakeConnection(**kw)
        with lock:
            opened.append(conn)
        return conn

    monkeypatch.setattr(mysql.connector, "connect", connect)
    factory = DatabaseConnection(CONFIG)
    workers = 20
    all_open = threading.Barrier(workers)
    errors: list[BaseException] = []

    def work():
        try:
            with db_cursor(factory) as (_, cur):
                cur.execute("SELECT 1")
                # Hold the connection until every worker has one open.
                all_open.wait(timeout=5)
        except BaseException as e:  # collected for the main thread
            errors.append(e)

    threads = [threading.Thread(target=work) for _ in range(workers)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert len({id(c) for c in opened}) == workers
    assert all(c.closed for c in opened)
