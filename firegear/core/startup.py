"""Run `alembic upgrade head` on boot and track whether the schema is ready."""

from __future__ import annotations

import os
import subprocess
import threading
import time

import structlog
from structlog.stdlib import BoundLogger

_state_lock = threading.Lock()
_completed = False
_last_error: str | None = None
_worker: threading.Thread | None = None


def _truthy(value: str | None) -> bool:
    return value is not None and value.lower() in {"1", "true", "yes", "on"}


def _max_attempts() -> int:
    return int(os.getenv("ALEMBIC_STARTUP_MAX_ATTEMPTS", "10"))


def _retry_delay() -> float:
    return float(os.getenv("ALEMBIC_STARTUP_RETRY_SECONDS", "2"))


def _exit_on_failure() -> bool:
    override = os.getenv("ALEMBIC_EXIT_ON_FAILURE")
    if override is not None:
        return _truthy(override)
    return os.getenv("APP_ENV", "dev").lower() == "prod"


def is_migration_completed() -> bool:
    """Return True once startup migrations have finished successfully."""

    return _completed


def last_migration_error() -> str | None:
    return _last_error


def _record(success: bool, error: str | None) -> None:
    global _completed, _last_error
    with _state_lock:
        _completed = success
        _last_error = None if success else error


def run_database_migrations() -> None:
    """Upgrade the schema, blocking in prod and in a background thread elsewhere.

    Under TESTING the schema is created by the test fixtures, so the run is
    skipped and the app reports ready immediately.
    """

    global _worker
    logger = structlog.get_logger(__name__)

    if _completed:
        logger.info("migrations_skipped", reason="already_completed")
        return

    if _truthy(os.getenv("TESTING")):
        _record(True, None)
        logger.info("migrations_skipped", reason="testing")
        return

    if _exit_on_failure():
        success, error = _upgrade_with_retries(logger)
        _record(success, error)
        if not success:
            raise SystemExit(1)
        return

    if _worker is not None and _worker.is_alive():
        logger.info("migrations_skipped", reason="already_running")
        return

    _record(False, None)
    _worker = threading.Thread(target=_background_upgrade, name="alembic-startup", daemon=True)
    _worker.start()
    logger.info("migrations_background_started")


def _background_upgrade() -> None:
    logger = structlog.get_logger(__name__).bind(mode="background")
    success, error = _upgrade_with_retries(logger)
    _record(success, error)


def _upgrade_with_retries(logger: BoundLogger) -> tuple[bool, str | None]:
    command = ("alembic", "upgrade", "head")
    attempts = _max_attempts()
    last_error: str | None = None

    for attempt in range(1, attempts + 1):
        try:
            logger.info("migrations_start", attempt=attempt)
            subprocess.run(command, check=True)
        except FileNotFoundError:
            logger.error("alembic_command_missing", command=" ".join(command))
            return False, "alembic command not found"
        except subprocess.CalledProcessError as exc:  # pragma: no cover - error path
            last_error = f"alembic exited with return code {exc.returncode}"
            logger.error("migrations_failed", attempt=attempt, returncode=exc.returncode)
        else:
            logger.info("migrations_succeeded", attempt=attempt)
            return True, None

        if attempt < attempts:
            delay = _retry_delay() * attempt
            logger.info("migrations_retry", next_attempt=attempt + 1, delay_seconds=delay)
            time.sleep(delay)

    logger.error("migrations_exhausted", attempts=attempts)
    return False, last_error or "alembic upgrade failed"


__all__ = ["is_migration_completed", "last_migration_error", "run_database_migrations"]
