import argparse
import sys

from ranchbook.config import get_settings
from ranchbook.core.errors import NotFound
from ranchbook.core.logging import setup_logging
from ranchbook.database import build_engine, build_session_factory, create_schema
from ranchbook.services.user_service import grant_owner


def parse_args():
    parser = argparse.ArgumentParser(
        description="Promote an existing account (must have logged in once) to owner."
    )
    parser.add_argument("email", help="Email address of the account to promote.")
    return parser.parse_args()


def main():
    settings = get_settings()
    setup_logging(settings)
    args = parse_args()

    engine = build_engine(settings.DATABASE_URL)
    create_schema(engine)

    db = build_session_factory(engine)()
    try:
        user = grant_owner(db, args.email)
    except NotFound as exc:
        print(exc.message, file=sys.stderr)
        sys.exit(1)
    finally:
        db.close()
    print("{} is now an owner.".format(user.email))


if __name__ == "__main__":
    main()
