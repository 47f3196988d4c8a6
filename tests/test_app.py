"""Application wiring and logging setup."""

import importlib

from findora.core.logging import get_logger, setup_logging


def test_module_loggers_log_after_setup(capsys):
    setup_logging("INFO", json_logs=True)
    logger = get_logger("findora.onboarding.registration")

    logger.info("Seller profile created", user_id=7)

    out = capsys.readouterr().out
    assert "Seller profile created" in out
    assert '"user_id": 7' in out


def test_app_imports_with_logging_configured():
    setup_logging("INFO", json_logs=True)
    main = importlib.import_module("findora.main")

    paths = {route.path for route in main.app.routes}
    assert {
        "/health",
        "/api/auth/login",
        "/api/seller/register",
        "/api/seller/profile",
        "/api/seller/documents/{document_type}",
        "/api/dashboard",
        "/api/seller/dashboard",
    } <= paths


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
