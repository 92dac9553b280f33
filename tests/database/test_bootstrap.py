from pathlib import Path

from src.workforce_attendance.workforce_attendance.database.bootstrap import clean_script, iter_sql_statements

SCHEMA = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def test_splits_on_semicolons_outside_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); SELECT 1;\nSELECT 2"
    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", "SELECT 1", "SELECT 2"]


def test_schema_declares_uniqueness_keys():
    statements = list(iter_sql_statements(SCHEMA.read_text(encoding="utf-8")))
    text = "\n".join(statements)

    assert "uq_attendance_one_active" in text
    assert "uq_remote_one_pending" in text
    assert any("CREATE TABLE" in s and "office_locations" in s for s in statements)


def test_clean_script_drops_database_selection_and_comments():
    sql = "CREATE DATABASE foo;\nUSE foo;\n-- note; with semicolon\nSELECT 1;"
    assert list(iter_sql_statements(clean_script(sql))) == ["SELECT 1"]


def test_doubled_quote_inside_literal():
    assert list(iter_sql_statements("INSERT INTO t VALUES ('it''s; fine')")) == ["INSERT INTO t VALUES ('it''s; fine')"]
