"""Create the CPMS tables, or drop and recreate them with --reset."""
import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import inspect

from cpms.database import engine, Base
import cpms.models  # noqa: F401 - registers all models


def init_db(reset: bool = False) -> list:
    if reset:
        print(f"Dropping constructions and users on {engine.url!r} ...")
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    return sorted(inspect(engine).get_table_names())


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--reset", action="store_true", help="Drop all CPMS tables before creating them")
    args = parser.parse_args()

    tables = init_db(reset=args.reset)
    print(f"Tables ready: {', '.join(tables)}")


if __name__ == "__main__":
    main()
