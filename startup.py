#!/usr/bin/env python3
"""
Startup script for container deployment
Runs migrations and seeds default accounts before starting the FastAPI app
"""

import logging
import os
import subprocess
import sys

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger("startup")


def run_command(command, description):
    """Run a command and report whether it succeeded"""
    logger.info("%s...", description)
    try:
        result = subprocess.run(command, check=True, capture_output=True, text=True)
    except subprocess.CalledProcessError as e:
        logger.error("%s failed: %s", description, e)
        if e.stderr:
            logger.error(e.stderr)
        return False
    logger.info("%s completed successfully", description)
    if result.stdout:
        logger.info(result.stdout)
    return True


def main():
    """Main startup process"""
    logger.info("Starting Employee Trip Booking...")

    if not run_command([sys.executable, "migrate.py"], "Database migration"):
        logger.warning("Database migration failed, but continuing...")

    if not run_command([sys.executable, "check_db.py"], "Database connection test"):
        logger.warning("Database connection test failed, but continuing...")

    if not run_command([sys.executable, "create_users.py"], "Default accounts"):
        logger.warning("Creating default accounts failed, but continuing...")

    port = os.getenv("PORT", "8000")
    logger.info("Starting server on port %s...", port)
    try:
        subprocess.run(
            ["uvicorn", "tripbook.main:app", "--host", "0.0.0.0", "--port", port],
            check=True,
        )
    except subprocess.CalledProcessError as e:
        logger.error("Failed to start server: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
