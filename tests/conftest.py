from __future__ import annotations

import difflib
import logging
import pprint
from datetime import datetime
from typing import Any

import pytest

from centrosalud.app.application.dtos import MedicoLight, PacienteLight
from centrosalud.app.container import build_container
from centrosalud.app.infrastructure.memoria import FabricaRepositorios, GeneradorIdsRepositorio

AHORA = datetime(2030, 6, 15, 10, 30)


def reloj_fijo() -> datetime:
    return AHORA


@pytest.fixture()
def ahora() -> datetime:
    """Instante que ven los servicios del container de tests."""
    return AHORA


@pytest.fixture()
def generador() -> GeneradorIdsRepositorio:
    return GeneradorIdsRepositorio()


@pytest.fixture()
def fabrica(generador: GeneradorIdsRepositorio) -> FabricaRepositorios:
    return FabricaRepositorios(generador)


@pytest.fixture()
def container(generador: GeneradorIdsRepositorio):
    return build_container(generador=generador, reloj=reloj_fijo)


@pytest.fixture()
def medico_autorizado() -> MedicoLight:
    return MedicoLight(id=1, nombre="Dr. Ana Ruiz", num_colegiado=2, puede_tomar_decisiones=True)


@pytest.fixture()
def medico_no_autorizado() -> MedicoLight:
    return MedicoLight(id=9, nombre="Dr. Sin Permiso", puede_tomar_decisiones=False)


@pytest.fixture()
def paciente_light() -> PacienteLight:
    return PacienteLight(id=2, nombre="Jorge", num_utente=123456789)


@pytest.fixture()
def assert_expected_actual():
    def _assert(expected: Any, actual: Any, *, message: str) -> None:
        expected_str = pprint.pformat(expected, width=120)
        actual_str = pprint.pformat(actual, width=120)
        diff = "\n".join(
            difflib.unified_diff(
                expected_str.splitlines(),
                actual_str.splitlines(),
                fromfile="expected",
                tofile="actual",
                lineterm="",
            )
        )
        assert expected == actual, (
            f"{message}\nExpected:\n{expected_str}\nActual:\n{actual_str}\nDiff:\n{diff}"
        )

    return _assert


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
