import logging
import os

from sqlalchemy.orm import Session

from paytrack.app.core.security import get_password_hash
from paytrack.app.core.settings import get_settings
from paytrack.app.models.user import User

logger = logging.getLogger(__name__)


def ensure_default_admin(db: Session) -> None:
    """
    Create the configured admin account when the database has no admin yet.
    Skips execution when running under pytest or when no password is configured.
    """
    if os.getenv("PYTEST_CURRENT_TEST"):
        return

    settings = get_settings()
    if not settings.default_admin_password:
        return
    if db.query(User).filter(User.role == "admin").first():
        return

    existing = db.query(User).filter(User.username == settings.default_admin_username).first()
    if existing:
        existing.role = "admin"
        logger.info("Promoted existing user %s to admin", existing.username)
    else:
        db.add(
            User(
                username=settings.default_admin_username,
                hashed_password=get_password_hash(settings.default_admin_password),
                role="admin",
                is_active=True,
            )
        )
        logger.info("Created default admin user %s", settings.default_admin_username)
    db.commit()
