import argparse

from ranchbook.config import get_settings
from ranchbook.core.logging import setup_logging
from ranchbook.database import build_engine, build_session_factory, create_schema
from ranchbook.services.seed_service import reset_ranch_data, seed_sample_data


def parse_args():
    parser = argparse.ArgumentParser(description="Seed sample ranch data.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing livestock, transactions, inventory and health records first.",
    )
    return parser.parse_args()


def main():
    settings = get_settings()
    setup_logging(settings)
    args = parse_args()

    engine = build_engine(settings.DATABASE_URL)
    create_schema(engine)

    db = build_session_factory(engine)()
    try:
        if args.reset:
            reset_ranch_data(db)
        if seed_sample_data(db):
            print("Seed data created.")
        else:
            print("Seed skipped: livestock already exists.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
