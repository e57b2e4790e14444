"""
Example 01: Loading a Row Collection

This example demonstrates loading rows of a localized table into a
RowCollection and reading typed values from each Row.
"""

from row_list import Database, Row, RowCollection
import tempfile
from pathlib import Path


class CityDatabase(Database):
    """Database with a localized table of cities."""

    def on_create(self, connection):
        connection.execute("""
            CREATE TABLE city (
                _id INTEGER PRIMARY KEY,
                name TEXT NOT NULL,
                population INTEGER,
                locale TEXT NOT NULL
            )
        """)
        connection.executemany(
            "INSERT INTO city (name, population, locale) VALUES (?, ?, ?)",
            [
                ("Prague", 1357326, "en"),
                ("Brno", 382405, "en"),
                ("Praha", 1357326, "cs"),
                ("Unknown", None, "en"),
            ],
        )


class City(Row):
    """A row of the city table."""

    @property
    def name(self):
        return self.get_string("name")

    @property
    def population(self):
        return self.get_int("population", 0)


def main():
    db_path = Path(tempfile.mkdtemp()) / "cities.db"

    with CityDatabase.from_path(str(db_path)) as db:
        cities = RowCollection(City, database=db)

        # Example 1: All English rows, ordered by name
        print("Example 1: English cities")
        cities.load("city", "en", order_by="name")
        for city in cities:
            print(f"  - {city.name}: {city.population}")

        # Example 2: Filter, locale and a row cap together
        print("\nExample 2: Large English cities, at most one")
        cities.load("city", "en", "population > ?", [1000000], max_items=1)
        print(f"  {cities.size()} row(s): {[city.name for city in cities]}")

        # Example 3: A failed query leaves the collection empty
        print("\nExample 3: Missing table")
        cities.load("no_such_table")
        print(f"  Empty: {cities.is_empty()}")


if __name__ == "__main__":
    main()
