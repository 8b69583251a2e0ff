"""Create the default admin, user, seller and buyer accounts from settings"""
import logging
import sys
from sqlalchemy.exc import SQLAlchemyError
from tripbook.config import settings
from tripbook.database import SessionLocal
from tripbook.services import account_service

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger("create_users")


def create_initial_users():
    db = SessionLocal()
    try:
        created = account_service.ensure_default_accounts(db)
    except SQLAlchemyError as e:
        logger.error("Error creating users: %s", e)
        return False
    finally:
        db.close()

    if created == 0:
        logger.info("Default accounts already exist")
        return True

    logger.info("Created %d default accounts", created)
    for username in (settings.default_admin_username,
                     settings.default_user_username,
                     settings.default_seller_username,
                     settings.default_buyer_username):
        logger.info("  %s", username)
    return True


if __name__ == "__main__":
    success = create_initial_users()
    sys.exit(0 if success else 1)
