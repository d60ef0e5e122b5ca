"""
Database configuration, session management and schema initialization.
"""

import logging
from sqlalchemy import create_engine, event, func, inspect, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import settings

logger = logging.getLogger("macrotracker.database")

# Create SQLAlchemy Base
Base = declarative_base()

MACRO_UNIT_CONSTRAINT = "check_ingredient_templates_macro_unit"

DEFAULT_INGREDIENT_TEMPLATES = [
    # name, carbs, fat, protein, kcal, macro_unit
    ("Chicken Breast", 0, 3.6, 31, 165, "per_100g"),
    ("Brown Rice", 23, 0.9, 2.7, 111, "per_100g"),
    ("Broccoli", 7, 0.4, 2.8, 34, "per_100g"),
    ("Salmon", 0, 13, 20, 208, "per_100g"),
    ("Sweet Potato", 20, 0.1, 1.6, 86, "per_100g"),
    ("Eggs", 1.1, 5.3, 6.3, 74, "per_unit"),
    ("Greek Yogurt", 3.6, 0.4, 10, 59, "per_100g"),
    ("Oatmeal", 12, 1.8, 2.4, 68, "per_100g"),
    ("Banana", 23, 0.3, 1.1, 89, "per_unit"),
    ("Almonds", 6, 49, 21, 579, "per_100g"),
]


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """Create a pooled engine for the given URL."""
    if url.startswith("sqlite"):
        db_engine = create_engine(
            url, echo=echo, future=True, connect_args={"check_same_thread": False}
        )
        event.listen(db_engine, "connect", _enable_sqlite_foreign_keys)
        return db_engine
    return create_engine(url, echo=echo, future=True, pool_pre_ping=True)


# Create engine
engine = create_db_engine(settings.database_url, echo=settings.db_echo)

# Create session factory
SessionLocal = sessionmaker(bind=engine, future=True, expire_on_commit=False)


def _ensure_macro_unit_constraint(conn) -> None:
    """Add the macro_unit check to ingredient_templates when the catalog lacks it."""
    existing = {
        c.get("name") for c in inspect(conn).get_check_constraints("ingredient_templates")
    }
    if MACRO_UNIT_CONSTRAINT in existing:
        return
    if conn.dialect.name == "sqlite":
        # SQLite has no ALTER TABLE ... ADD CONSTRAINT
        logger.warning("Cannot add %s on SQLite", MACRO_UNIT_CONSTRAINT)
        return
    conn.execute(
        text(
            f"ALTER TABLE ingredient_templates ADD CONSTRAINT {MACRO_UNIT_CONSTRAINT} "
            "CHECK (macro_unit IN ('per_unit', 'per_100g'))"
        )
    )
    logger.info("Added constraint %s", MACRO_UNIT_CONSTRAINT)


def _seed_ingredient_templates(conn) -> None:
    """Insert the default ingredient templates if the table is empty."""
    from domain.models.template import IngredientTemplate

    count = conn.execute(select(func.count()).select_from(IngredientTemplate.__table__)).scalar_one()
    if count:
        return
    conn.execute(
        IngredientTemplate.__table__.insert(),
        [
            {
                "name": name,
                "carbs": carbs,
                "fat": fat,
                "protein": protein,
                "kcal": kcal,
                "macro_unit": macro_unit,
            }
            for name, carbs, fat, protein, kcal, macro_unit in DEFAULT_INGREDIENT_TEMPLATES
        ],
    )
    logger.info("Seeded %d default ingredient templates", len(DEFAULT_INGREDIENT_TEMPLATES))


def init_database(bind: Engine = None):
    """Initialize database schema. Safe to run on every start."""
    # Register every model on Base.metadata
    from domain.models import meal, template, daily_targets  # noqa: F401

    with (bind or engine).begin() as conn:
        Base.metadata.create_all(bind=conn)
        logger.info("Database tables created successfully")
        _ensure_macro_unit_constraint(conn)
        _seed_ingredient_templates(conn)


def get_db_session():
    """Get database session (for FastAPI dependency injection)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
