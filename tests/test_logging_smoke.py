from __future__ import annotations

import json
from pathlib import Path

from centrosalud.app.bootstrap_logging import configure_logging, get_logger, set_operador, set_run_context
from centrosalud.app.crash_handler import fatal_exception_handler


def test_configure_logging_creates_operational_log(tmp_path: Path) -> None:
    configure_logging("test-app", tmp_path, json=False)
    set_run_context("run-test")
    set_operador(7)
    logger = get_logger("tests.logging")

    logger.info("hello operational")
    set_operador(None)

    content = (tmp_path / "centrosalud.log").read_text(encoding="utf-8")
    assert "hello operational" in content
    assert "run_id=run-test" in content
    assert "operador=7" in content


def test_json_mode_writes_one_object_per_line(tmp_path: Path) -> None:
    configure_logging("test-app", tmp_path, json=True)
    set_run_context("run-json")
    get_logger("tests.logging").warning("json line")

    lines = (tmp_path / "centrosalud.log").read_text(encoding="utf-8").splitlines()
    payload = json.loads(lines[-1])
    assert payload["message"] == "json line"
    assert payload["level"] == "WARNING"


def test_fatal_hook_handler_writes_crash_file(tmp_path: Path) -> None:
    configure_logging("test-app", tmp_path, json=False)
    set_run_context("run-fatal")
    handler = fatal_exception_handler(get_logger("tests.logging"))

    try:
        raise RuntimeError("fatal")
    except RuntimeError as exc:
        handler(type(exc), exc, exc.__traceback__)

    content = (tmp_path / "crash.log").read_text(encoding="utf-8")
    assert "unhandled_exception" in content
    assert "RuntimeError: fatal" in content


def test_logging_redacts_pii_in_message(tmp_path: Path) -> None:
    configure_logging("test-app", tmp_path, json=False)
    set_run_context("run-redact")

    get_logger("tests.logging").info("Paciente email jorge@example.com utente 123456789 tel +351 912 345 678")

    content = (tmp_path / "centrosalud.log").read_text(encoding="utf-8")
    assert "jorge@example.com" not in content
    assert "123456789" not in content
    assert "+351 912 345 678" not in content
    assert "***" in content
