#!/usr/bin/env python3
"""List database tables and their columns.
Usage: DATABASE_URL=... python scripts/list_tables.py"""
from sqlalchemy import create_engine, inspect

from lifting_diary.config import settings


def main():
    engine = create_engine(settings.sync_database_url)
    inspector = inspect(engine)
    tables = sorted(inspector.get_table_names())
    print("\n=== Tables ===\n")
    if not tables:
        print("No tables found.")
    for i, name in enumerate(tables, start=1):
        print(f"{i}. {name}")
    print(f"\nTotal tables: {len(tables)}\n")
    for name in tables:
        print(f"--- {name} ---")
        for col in inspector.get_columns(name):
            nullable = "NULL" if col["nullable"] else "NOT NULL"
            print(f"  {col['name']}: {col['type']} {nullable}")
        print()
    engine.dispose()


if __name__ == "__main__":
    main()
