#!/usr/bin/env python3
"""
Standalone database initialization script
Creates the schema, adds the macro unit check constraint and seeds the
ingredient template catalogue. Safe to run any number of times.
"""

import sys
import logging
from pathlib import Path

from dotenv import load_dotenv

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

load_dotenv()

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("macrotracker.init_db")


def init_postgresql() -> bool:
    """Initialize tables, constraint and seed data"""
    logger.info("=" * 60)
    logger.info("Initializing database...")
    logger.info("=" * 60)

    from sqlalchemy import inspect, func, select
    from sqlalchemy.exc import SQLAlchemyError

    from domain.models import engine, init_database, IngredientTemplate

    try:
        init_database()
    except SQLAlchemyError as e:
        logger.error(f"✗ Failed to initialize database: {e}")
        return False

    tables = inspect(engine).get_table_names()
    logger.info(f"✓ Schema ready with {len(tables)} tables: {', '.join(sorted(tables))}")

    with engine.connect() as conn:
        count = conn.execute(
            select(func.count()).select_from(IngredientTemplate.__table__)
        ).scalar_one()
    logger.info(f"✓ {count} ingredient templates available")
    return True


def main() -> int:
    return 0 if init_postgresql() else 1


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("Macro Tracker Database Initialization (Standalone)")
    print("=" * 60)
    print("\nThis will create/update:")
    print("  • meals, ingredients and meal_ingredients")
    print("  • ingredient_templates, meal_templates and their links")
    print("  • daily_targets")
    print("\n" + "=" * 60 + "\n")

    exit_code = main()

    if exit_code == 0:
        print("\n" + "=" * 60)
        print("SUCCESS! Your database is ready to use.")
        print("=" * 60 + "\n")
    else:
        print("\n" + "=" * 60)
        print("FAILED! Check the errors above.")
        print("=" * 60 + "\n")

    sys.exit(exit_code)
