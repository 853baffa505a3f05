import logging
from sqlalchemy.orm import Session

class BaseService:
    """Shared plumbing for domain services: the request session and a named logger."""

    def __init__(self, db: Session):
        self.db = db
        self._logger = logging.getLogger(self.__class__.__module__)

    def log_info(self, message: str, **extra):
        self._logger.info(message, extra=extra or None)

    def log_warning(self, message: str, **extra):
        self._logger.warning(message, extra=extra or None)

    def log_error(self, message: str, **extra):
        self._logger.error(message, extra=extra or None)

    def _commit(self):
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
