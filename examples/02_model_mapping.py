"""
Example 02: Mapping Rows to Models

This example demonstrates turning text-valued rows into typed Pydantic
models with ModelMapper, and copying rows with Row(origin).
"""

from row_list import Database, ModelMapper, Row, RowCollection
from pydantic import BaseModel


class Book(BaseModel):
    id: int
    title: str
    year: int | None = None


def main():
    with Database.from_path(":memory:") as db:
        db.exec_sql("CREATE TABLE book (_id INTEGER PRIMARY KEY, title TEXT, year INTEGER)")
        db.exec_sql("INSERT INTO book (title, year) VALUES (?, ?)", ["Dune", 1965])
        db.exec_sql("INSERT INTO book (title, year) VALUES (?, ?)", ["Untitled", None])

        rows = RowCollection()
        rows.load_from(db, "book", order_by="_id")

        # Example 1: Raw rows keep values as text; NULL columns are absent
        print("Example 1: Raw rows")
        for row in rows:
            print(f"  {row!r}")

        # Example 2: Typed models, with '_id' mapped to 'id'
        print("\nExample 2: Models")
        mapper = ModelMapper(Book, aliases={"_id": "id"})
        for book in mapper.map_many(rows):
            print(f"  {book}")

        # Example 3: Copies are independent of their origin
        print("\nExample 3: Copy")
        copy = Row(rows.get_item(0))
        rows.get_item(0).clear()
        print(f"  origin={rows.get_item(0)!r} copy={copy!r}")


if __name__ == "__main__":
    main()
