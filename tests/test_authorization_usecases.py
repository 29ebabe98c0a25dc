from __future__ import annotations

import pytest

from centrosalud.app.application.dtos import MedicoLight
from centrosalud.app.application.security import exigir_argumento, exigir_autorizacion, verificar_clave
from centrosalud.app.domain.exceptions import (
    ArgumentoNuloError,
    AuthorizationError,
    DomainError,
    MedicoNoAutorizadoError,
    ValidationError,
)


def test_exigir_argumento() -> None:
    assert exigir_argumento(0, "valor") == 0
    with pytest.raises(ArgumentoNuloError, match="valor"):
        exigir_argumento(None, "valor")


def test_exigir_autorizacion_solo_mira_la_capacidad_de_decision() -> None:
    medico = MedicoLight(id=-1, nombre="")

    assert exigir_autorizacion(medico, "leer") is medico
    with pytest.raises(MedicoNoAutorizadoError, match="leer"):
        exigir_autorizacion(MedicoLight(id=1, puede_tomar_decisiones=False), "leer")


def test_jerarquia_de_errores() -> None:
    assert issubclass(ArgumentoNuloError, ValidationError)
    assert issubclass(MedicoNoAutorizadoError, AuthorizationError)
    assert issubclass(AuthorizationError, DomainError)


def test_verificar_clave() -> None:
    assert verificar_clave("0000", "0000") is True
    assert verificar_clave("000", "0000") is False
    assert verificar_clave(None, "0000") is False


@pytest.mark.parametrize(
    "operacion",
    [
        lambda c, m: c.citas.agregar_cita(None, m),
        lambda c, m: c.diagnosticos.agregar_diagnostico(None, m),
        lambda c, m: c.examenes.agregar_examen(None, m),
        lambda c, m: c.pacientes.agregar_paciente(None, m),
    ],
)
def test_registro_nulo_antes_que_autorizacion(container, medico_no_autorizado, operacion) -> None:
    with pytest.raises(ArgumentoNuloError):
        operacion(container, medico_no_autorizado)


@pytest.mark.parametrize(
    "operacion",
    [
        lambda c, m: c.examenes.eliminar_examen(1, m),
        lambda c, m: c.examenes.ordenar_por_coste(m),
        lambda c, m: c.examenes.actualizar_resultado(1, "ok", m),
        lambda c, m: c.diagnosticos.existe_diagnostico(1, m),
        lambda c, m: c.diagnosticos.obtener_diagnostico(1, m),
        lambda c, m: c.medicos.existe_medico(1, m),
        lambda c, m: c.medicos.obtener_medico(1, m),
        lambda c, m: c.medicos.obtener_citas_id(1, m),
        lambda c, m: c.pacientes.existe_paciente(1, m),
        lambda c, m: c.pacientes.obtener_paciente(1, m),
        lambda c, m: c.pacientes.obtener_citas_id(1, m),
    ],
)
def test_operaciones_bloqueadas_sin_decision(container, medico_no_autorizado, operacion) -> None:
    with pytest.raises(MedicoNoAutorizadoError):
        operacion(container, medico_no_autorizado)
