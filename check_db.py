"""Print row counts of the trip booking tables for the configured database"""
import logging
import sys
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from tripbook.database import engine, SessionLocal
from tripbook.models import Account, Employee, Trip, Booking

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger("check_db")


def check_database():
    try:
        tables = set(inspect(engine).get_table_names())
    except SQLAlchemyError as e:
        logger.error("Database connection failed: %s", e)
        return False

    logger.info("Connected to %s", engine.url.render_as_string(hide_password=True))
    db = SessionLocal()
    try:
        for model in (Account, Employee, Trip, Booking):
            if model.__tablename__ not in tables:
                logger.warning("Table %s is missing, run migrate.py", model.__tablename__)
                continue
            logger.info("%-10s %d rows", model.__tablename__, db.query(model).count())
    finally:
        db.close()
    return True


if __name__ == "__main__":
    sys.exit(0 if check_database() else 1)
