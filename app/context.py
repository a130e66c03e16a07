"""
Process-wide application context.

Built once per application by ``create_app`` and stored on ``app.state``;
request handlers reach it through the dependencies in ``app.dependencies``.
"""
from dataclasses import dataclass
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from app.auth import AdminGate
from app.config import Settings
from app.database import create_db_engine, create_session_factory
from app.services.upload_service import ImageUploadHandler


@dataclass
class AppContext:
    settings: Settings
    engine: Engine
    session_factory: sessionmaker
    uploads: ImageUploadHandler
    admin_gate: AdminGate


def build_context(app_settings: Settings) -> AppContext:
    """Wire the store, upload handler and admin gate from settings."""
    engine = create_db_engine(app_settings.database_url)
    return AppContext(
        settings=app_settings,
        engine=engine,
        session_factory=create_session_factory(engine),
        uploads=ImageUploadHandler(app_settings.upload_path, app_settings.MAX_UPLOAD_BYTES),
        admin_gate=AdminGate(app_settings.ADMIN_TOKEN),
    )
