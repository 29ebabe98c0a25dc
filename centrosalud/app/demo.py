"""
Recorrido guiado por los cinco servicios.

Cada bloque imprime el resultado o el mensaje de error. Los errores de
autorización se capturan antes que el resto, como haría cualquier cliente
que quiera tratarlos aparte.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable

from centrosalud.app.application.dtos import CitaLight, DiagnosticoLight, ExamenLight, MedicoLight, PacienteLight
from centrosalud.app.application.services import GestionCitas
from centrosalud.app.bootstrap_logging import get_logger, set_operador
from centrosalud.app.container import AppContainer
from centrosalud.app.domain.exceptions import DomainError, EntidadYaExisteError, MedicoNoAutorizadoError

LOGGER = get_logger(__name__)

Salida = Callable[[str], None]


def ejecutar_demo(
    container: AppContainer,
    data_dir: Path,
    salida: Salida = print,
    reloj: Callable[[], datetime] = datetime.now,
) -> None:
    ahora = reloj()
    paciente1 = PacienteLight(id=1, nombre="Joao")
    paciente2 = PacienteLight(id=2, nombre="Jorge")
    medico1 = MedicoLight(id=1, nombre="Dr. João", num_colegiado=2)
    set_operador(medico1.id)

    cita1 = CitaLight(id=1, paciente_id=paciente2.id, medico_id=medico1.id, fecha=ahora)
    cita2 = CitaLight(id=2, paciente_id=paciente2.id, medico_id=medico1.id, fecha=ahora + timedelta(days=1))
    cita3 = CitaLight(id=3, paciente_id=paciente2.id, medico_id=medico1.id, fecha=ahora + timedelta(days=2))

    _demo_citas(container, data_dir, salida, paciente1, medico1, cita1, cita2, cita3)
    _demo_pacientes(container, salida, medico1)
    _demo_medicos(container, salida, medico1)
    _demo_examenes(container, salida, medico1, ahora)
    _demo_diagnosticos(container, salida, medico1, ahora, cita1)
    set_operador(None)


def _demo_citas(
    container: AppContainer,
    data_dir: Path,
    salida: Salida,
    paciente1: PacienteLight,
    medico1: MedicoLight,
    cita1: CitaLight,
    cita2: CitaLight,
    cita3: CitaLight,
) -> None:
    salida("\nCITAS:\n")
    citas1 = container.citas
    # Segunda agenda independiente, con su propio repositorio.
    citas2 = GestionCitas(container.fabrica.citas())

    _intentar(salida, "agregar cita 1", lambda: citas1.agregar_cita(cita1, MedicoLight(puede_tomar_decisiones=False)))
    _intentar(salida, "agregar cita 2", lambda: citas1.agregar_cita(cita2, MedicoLight(puede_tomar_decisiones=True)))
    _intentar(salida, "agregar cita 3", lambda: citas2.agregar_cita(cita3, MedicoLight(puede_tomar_decisiones=True)))

    _intentar(salida, "cita 2 existe para el paciente 1", lambda: citas1.existe_cita_paciente(cita2.id, paciente1))
    _intentar(salida, "cita 1 existe para el médico 1", lambda: citas1.existe_cita(cita1.id, medico1))

    obtenida = _intentar(salida, "obtener cita 3", lambda: citas2.obtener_cita(cita3.id, medico1))
    if obtenida is not None:
        salida(f"Cita 3 obtenida: id={obtenida.id} fecha={obtenida.fecha.isoformat()}")

    _intentar(salida, "eliminar cita 2", lambda: citas1.eliminar_cita(cita2.id, medico1))
    _intentar(salida, "exportar citas", lambda: citas1.exportar_citas(data_dir / "citas.json"))


def _demo_pacientes(container: AppContainer, salida: Salida, medico1: MedicoLight) -> None:
    salida("\nPACIENTES:\n")
    paciente = PacienteLight(id=3, nombre="Pedro")
    _intentar(salida, "agregar paciente 3", lambda: container.pacientes.agregar_paciente(paciente, medico1))


def _demo_medicos(container: AppContainer, salida: Salida, medico1: MedicoLight) -> None:
    salida("\nMÉDICOS:\n")
    _intentar(salida, "agregar médico 1", lambda: container.medicos.agregar_medico(medico1))


def _demo_examenes(container: AppContainer, salida: Salida, medico1: MedicoLight, ahora: datetime) -> None:
    salida("\nEXÁMENES:\n")
    examen = ExamenLight(id=1, tipo="Análisis de sangre", fecha=ahora + timedelta(days=365), coste=50.0)
    _intentar(salida, "agregar examen 1", lambda: container.examenes.agregar_examen(examen, medico1))
    _intentar(salida, "coste total de exámenes", container.examenes.coste_total)


def _demo_diagnosticos(
    container: AppContainer,
    salida: Salida,
    medico1: MedicoLight,
    ahora: datetime,
    cita1: CitaLight,
) -> None:
    salida("\nDIAGNÓSTICOS:\n")
    servicio = container.diagnosticos
    # Fecha ya pasada: se rechaza.
    diagnostico1 = DiagnosticoLight(id=1, fecha=ahora - timedelta(minutes=1), cita_id=1)
    diagnostico2 = DiagnosticoLight(id=2, fecha=ahora + timedelta(days=365), cita_id=2)

    _intentar(salida, "agregar diagnóstico 1", lambda: servicio.agregar_diagnostico(diagnostico1, medico1))
    _intentar(salida, "agregar diagnóstico 2", lambda: servicio.agregar_diagnostico(diagnostico2, medico1))
    _intentar(salida, "diagnóstico 1 existe", lambda: servicio.existe_diagnostico(diagnostico1.id, medico1))
    _intentar(salida, "obtener diagnóstico 2", lambda: servicio.obtener_diagnostico(diagnostico2.id, medico1))
    _intentar(salida, "asociar cita 1 al diagnóstico 2", lambda: servicio.asociar_cita(diagnostico2.id, cita1.id))
    _intentar(
        salida,
        "ampliar descripción del diagnóstico 2",
        lambda: servicio.agregar_texto_descripcion(diagnostico2.id, "Texto adicional al diagnóstico.", medico1),
    )
    _intentar(salida, "eliminar diagnóstico 2", lambda: servicio.eliminar_diagnostico(diagnostico2.id, medico1))


def _intentar(salida: Salida, accion: str, operacion: Callable[[], object]) -> object:
    try:
        resultado = operacion()
    except MedicoNoAutorizadoError as exc:
        salida(f"Error de autorización al {accion} [{int(exc.codigo)}]: {exc}")
        return None
    except EntidadYaExisteError as exc:
        salida(f"Error al {accion} [{int(exc.codigo)}]: {exc}")
        return None
    except DomainError as exc:
        LOGGER.warning("demo_operacion_fallida accion=%s error=%s", accion, type(exc).__name__)
        salida(f"Error al {accion}: {exc}")
        return None
    salida(f"{accion}: {resultado}")
    return resultado
