"""
Application startup validation and initialization.

This module performs startup checks so the API does not start serving
requests against a misconfigured or unreachable database.
"""

import logging
import sys
from typing import List, Tuple

import sqlalchemy as sa
from sqlalchemy import text

from core.config import settings
from core.database import Base, engine, init_db

logger = logging.getLogger(__name__)


def configure_logging():
    """Configure root logging from settings"""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


class StartupValidator:
    """Validates application startup requirements"""

    def __init__(self, bind=None):
        self.bind = bind if bind is not None else engine
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def check_environment_config(self) -> bool:
        if settings.is_production:
            if settings.debug:
                self.errors.append("DEBUG must be disabled in production")
                return False
            if settings.is_sqlite:
                self.warnings.append(
                    "SQLite in production serializes all writers - use PostgreSQL"
                )
        return True

    def check_database_connection(self) -> bool:
        try:
            with self.bind.connect() as conn:
                conn.execute(text("SELECT 1")).fetchone()
            logger.info("Database connection successful")
            return True
        except sa.exc.SQLAlchemyError as e:
            self.errors.append(f"Database connection failed: {str(e)}")
            return False

    def check_required_tables(self) -> bool:
        """Create any missing tables and report what was created"""
        try:
            existing = set(sa.inspect(self.bind).get_table_names())
            missing = [t for t in Base.metadata.tables if t not in existing]
            if missing:
                self.warnings.append(f"Creating missing tables: {', '.join(sorted(missing))}")
                init_db(self.bind)
            return True
        except sa.exc.SQLAlchemyError as e:
            self.errors.append(f"Could not prepare database tables: {str(e)}")
            return False

    def validate_all(self) -> Tuple[bool, List[str], List[str]]:
        """Run all validation checks"""
        checks = [
            ("Environment Configuration", self.check_environment_config),
            ("Database Connection", self.check_database_connection),
            ("Database Tables", self.check_required_tables),
        ]

        all_passed = True
        for check_name, check_func in checks:
            logger.info(f"Running check: {check_name}")
            if not check_func():
                all_passed = False
                # Table checks need a reachable database
                if check_name == "Database Connection":
                    break

        return all_passed, self.errors, self.warnings


def run_startup_checks(bind=None):
    """Run all startup validation checks"""
    logger.info("=" * 60)
    logger.info("Starting Sports Meet Backend")
    logger.info(f"Environment: {settings.environment}")
    logger.info("=" * 60)

    validator = StartupValidator(bind)
    passed, errors, warnings = validator.validate_all()

    for warning in warnings:
        logger.warning(f"Startup warning: {warning}")
    for error in errors:
        logger.error(f"Startup error: {error}")

    if not passed and settings.is_production:
        logger.error("Cannot start in production with errors!")
        sys.exit(1)
    elif not passed:
        logger.warning("Starting in development mode despite errors")
    else:
        logger.info("All startup checks passed")

    return passed, warnings
