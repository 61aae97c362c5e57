from __future__ import annotations

from warehouse_attendance.database import bootstrap
from warehouse_attendance.database.bootstrap import (
    SCHEMA_PATH,
    SEED_PATH,
    _strip_create_db_and_use,
    _strip_line_comments,
    iter_sql_statements,
)


def test_splitter_ignores_semicolons_inside_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); INSERT INTO t VALUES (\"c;d\");\nSELECT 1"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("c;d")',
        "SELECT 1",
    ]


def test_splitter_handles_escaped_quote():
    sql = "INSERT INTO t VALUES ('O\\'Brien; Jr'); SELECT 2;"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('O\\'Brien; Jr')", "SELECT 2"]


def test_create_database_and_use_lines_are_removed():
    sql = "CREATE DATABASE IF NOT EXISTS foo;\nUSE foo;\nCREATE TABLE x (id INT);\n"

    stripped = _strip_create_db_and_use(sql)

    assert "DATABASE" not in stripped
    assert "USE foo" not in stripped
    assert "CREATE TABLE x (id INT);" in stripped


def test_line_comments_are_removed():
    assert list(iter_sql_statements(_strip_line_comments("-- header; with semicolon\nSELECT 1;"))) == ["SELECT 1"]


def test_bundled_sql_files_parse():
    schema = list(iter_sql_statements(_strip_line_comments(_strip_create_db_and_use(SCHEMA_PATH.read_text("utf-8")))))
    seed = list(iter_sql_statements(_strip_line_comments(SEED_PATH.read_text("utf-8"))))

    assert any("attendance_records" in stmt for stmt in schema)
    assert any("employees" in stmt for stmt in schema)
    assert seed and all(stmt.upper().startswith("INSERT") for stmt in seed)


class _RecordingConnection:
    def __init__(self):
        self.executed = []
        self.committed = False
        self.closed = False

    def cursor(self):
        return self

    def execute(self, sql):
        self.executed.append(sql)

    def commit(self):
        self.committed = True

    def close(self):
        self.closed = True


def test_ensure_database_exists_creates_configured_database(monkeypatch):
    raw = _RecordingConnection()
    calls = []

    def fake_connect(self, *, with_database=True):
        calls.append(with_database)
        return raw

    monkeypatch.setattr(bootstrap.DatabaseConnection, "connect", fake_connect)

    bootstrap.ensure_database_exists({"database": "almacen_norte"})

    assert calls == [False]
    assert raw.executed == [
        "CREATE DATABASE IF NOT EXISTS `almacen_norte` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
    ]
    assert raw.committed and raw.closed
