from .db import connect
from .logic import coerce_price, coerce_text
from .models import Transaction


def create_txn(db_path, *, name, description, date_time, price) -> Transaction:
    """Insert one transaction and return it with its store-assigned id.

    Values go in as given; the only checks are the column types of the
    store: ``price`` must cast to a finite number, text fields default to
    an empty string and an empty ``date_time`` is stored as NULL.
    """
    stored_price = coerce_price(price)
    stored_name = coerce_text(name, "name")
    stored_description = coerce_text(description, "description")
    stored_date_time = coerce_text(date_time, "dateTime") or None

    with connect(db_path) as conn:
        cur = conn.execute(
            """
            INSERT INTO transactions(name, description, date_time, price)
            VALUES (?, ?, ?, ?)
            """,
            (stored_name, stored_description, stored_date_time, stored_price),
        )
        row = conn.execute(
            """
            SELECT id, name, description, date_time, price
            FROM transactions
            WHERE id = ?
            """,
            (cur.lastrowid,),
        ).fetchone()
    return Transaction.from_row(row)


def list_txns(db_path) -> list[Transaction]:
    with connect(db_path) as conn:
        cur = conn.execute(
            """
            SELECT id, name, description, date_time, price
            FROM transactions
            ORDER BY id ASC
            """
        )
        return [Transaction.from_row(row) for row in cur.fetchall()]
