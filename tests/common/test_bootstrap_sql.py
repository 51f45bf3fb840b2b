from src.workday_attendance.workday_attendance.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use


def test_sql_splitter_keeps_semicolons_inside_quotes():
    sql = "CREATE TABLE a (x INT);\nINSERT INTO a VALUES ('x;y');\n  \nSELECT 1"
    assert list(_iter_sql_statements(sql)) == [
        "CREATE TABLE a (x INT)",
        "INSERT INTO a VALUES ('x;y')",
        "SELECT 1",
    ]


def test_strip_create_database_and_use():
    sql = "CREATE DATABASE IF NOT EXISTS foo;\nUSE foo;\nCREATE TABLE t (id INT);\n"
    stripped = _strip_create_db_and_use(sql)
    assert "DATABASE" not in stripped
    assert "USE" not in stripped
    assert list(_iter_sql_statements(stripped)) == ["CREATE TABLE t (id INT)"]
