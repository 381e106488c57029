from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from app.features.auth.models.user import User
from app.features.webpages.models.webpage import Webpage
from app.features.webpages.models.webpage_analysis_result import WebpageAnalysisResult

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def alembic_config(db_path) -> Config:
    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))
    config.set_main_option("sqlalchemy.url", f"sqlite+aiosqlite:///{db_path}")
    # keep the application's loggers configured
    config.attributes["configure_logger"] = False
    return config


def _columns(inspector, table):
    return {column["name"] for column in inspector.get_columns(table)}


class TestInitialMigration:
    """alembic upgrade head builds the same schema as the models"""

    def test_upgrade_matches_models(self, tmp_path):
        db_path = tmp_path / "migrated.db"
        command.upgrade(alembic_config(db_path), "head")

        inspector = inspect(create_engine(f"sqlite:///{db_path}"))
        for model in (User, Webpage, WebpageAnalysisResult):
            table = model.__table__
            assert table.name in inspector.get_table_names()
            assert _columns(inspector, table.name) == {column.name for column in table.columns}

        unique_indexes = {
            index["name"]
            for index in inspector.get_indexes("webpage_analysis_results")
            if index["unique"]
        }
        assert "ix_webpage_analysis_results_webpage_id" in unique_indexes

    def test_downgrade_removes_tables(self, tmp_path):
        db_path = tmp_path / "migrated.db"
        config = alembic_config(db_path)
        command.upgrade(config, "head")

        command.downgrade(config, "base")

        tables = set(inspect(create_engine(f"sqlite:///{db_path}")).get_table_names())
        assert tables <= {"alembic_version"}
