"""
Alembic revisions produce the same schema init_schema() declares.
"""

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from treehole.core.database import Database

ROOT = Path(__file__).resolve().parent.parent


def alembic_config(url: str) -> Config:
    cfg = Config(str(ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(ROOT / "alembic"))
    cfg.set_main_option("sqlalchemy.url", url)
    return cfg


def columns(url: str) -> set:
    engine = create_engine(url)
    try:
        return {col["name"] for col in inspect(engine).get_columns("messages")}
    finally:
        engine.dispose()


def test_upgrade_head_creates_full_schema(tmp_path):
    url = f"sqlite:///{tmp_path / 'alembic.db'}"

    command.upgrade(alembic_config(url), "head")

    assert columns(url) == {"id", "content", "time", "likes"}


def test_downgrade_removes_likes(tmp_path):
    url = f"sqlite:///{tmp_path / 'alembic.db'}"
    cfg = alembic_config(url)
    command.upgrade(cfg, "head")

    command.downgrade(cfg, "-1")

    assert columns(url) == {"id", "content", "time"}


def test_init_schema_accepts_migrated_database(tmp_path):
    url = f"sqlite:///{tmp_path / 'alembic.db'}"
    command.upgrade(alembic_config(url), "head")

    db = Database(url)
    db.init_schema()
    db.dispose()

    assert columns(url) == {"id", "content", "time", "likes"}
