import logging
import subprocess
import sys

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger("migrate")


def run_migration():
    """Run database migrations"""
    result = subprocess.run(['alembic', 'upgrade', 'head'],
                            capture_output=True, text=True)
    if result.returncode == 0:
        logger.info("Database migration completed successfully")
        return True
    logger.error("Migration failed: %s", result.stderr)
    return False


if __name__ == "__main__":
    success = run_migration()
    sys.exit(0 if success else 1)
