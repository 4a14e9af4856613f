import logging
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from storefront import main
from storefront.utils.logging_config import configure_logging


def test_startup_fails_when_store_unreachable(monkeypatch):
    def unreachable():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr(main, "init_db", unreachable)

    with pytest.raises(OperationalError):
        with TestClient(main.app):
            pytest.fail("application started without a database")


def test_startup_initializes_store(monkeypatch, client):
    calls = []
    monkeypatch.setattr(main, "init_db", lambda: calls.append(True))

    with TestClient(main.app) as started:
        assert started.get("/").status_code == 200

    assert calls == [True]


def test_configure_logging_writes_files(tmp_path):
    root_logger = logging.getLogger()
    saved_handlers, saved_level = list(root_logger.handlers), root_logger.level

    try:
        configure_logging(log_dir=tmp_path, level="info")
        configure_logging(log_dir=tmp_path, level="info")
        assert sum(1 for h in root_logger.handlers if getattr(h, "_storefront", False)) == 3

        logging.getLogger("storefront.test").error("disk full")
        for handler in root_logger.handlers:
            handler.flush()

        assert "disk full" in (tmp_path / "app.log").read_text()
        assert "disk full" in (tmp_path / "error.log").read_text()
    finally:
        for handler in list(root_logger.handlers):
            if getattr(handler, "_storefront", False):
                root_logger.removeHandler(handler)
                handler.close()
        root_logger.handlers[:] = saved_handlers
        root_logger.setLevel(saved_level)
