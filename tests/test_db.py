import sqlite3

from tracker.db import init_db
from tracker.settings import Settings


def test_init_db_creates_transactions_table(tmp_path):
    db_path = tmp_path / "nested" / "t.sqlite"
    settings = Settings(data_dir=db_path.parent, db_path=db_path)
    init_db(settings)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    columns = [
        row["name"]
        for row in conn.execute("PRAGMA table_info(transactions)").fetchall()
    ]
    conn.close()
    assert columns == [
        "id",
        "name",
        "description",
        "date_time",
        "price",
        "created_at",
    ]


def test_init_db_is_idempotent_and_keeps_rows(tmp_path):
    settings = Settings(data_dir=tmp_path, db_path=tmp_path / "t.sqlite")
    init_db(settings)

    conn = sqlite3.connect(str(settings.db_path))
    conn.execute(
        """
        INSERT INTO transactions(name, description, date_time, price)
        VALUES ('coffee', 'morning', '2025-09-07T10:30', -50)
        """
    )
    conn.commit()
    conn.close()

    init_db(settings)

    conn2 = sqlite3.connect(str(settings.db_path))
    count = conn2.execute("SELECT COUNT(*) FROM transactions").fetchone()[0]
    conn2.close()
    assert count == 1
