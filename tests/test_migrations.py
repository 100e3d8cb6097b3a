from alembic.config import Config
from sqlalchemy import inspect
from sqlalchemy.orm import Session


def test_alembic_config_sets_path_separator():
    """Current Alembic reads path_separator; without it every run warns."""
    alembic_cfg = Config("alembic.ini")
    assert alembic_cfg.get_main_option("path_separator") == "os"


def test_migrations_create_catalog_tables(db: Session):
    tables = set(inspect(db.get_bind()).get_table_names())
    assert {"authors", "books"} <= tables
