from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from centrosalud.app.application.security import CLAVE_ELIMINACION_POR_DEFECTO
from centrosalud.app.application.services import (
    GestionCitas,
    GestionDiagnosticos,
    GestionExamenes,
    GestionMedicos,
    GestionPacientes,
)
from centrosalud.app.bootstrap import ConfiguracionCentro
from centrosalud.app.infrastructure.memoria import FabricaRepositorios, GeneradorIdsRepositorio


@dataclass(slots=True)
class AppContainer:
    fabrica: FabricaRepositorios
    citas: GestionCitas
    diagnosticos: GestionDiagnosticos
    examenes: GestionExamenes
    medicos: GestionMedicos
    pacientes: GestionPacientes

    def servicios_exportables(self) -> dict[str, Callable[..., bool]]:
        return {
            "citas": self.citas.exportar_citas,
            "diagnosticos": self.diagnosticos.exportar_diagnosticos,
            "examenes": self.examenes.exportar_examenes,
            "medicos": self.medicos.exportar_medicos,
            "pacientes": self.pacientes.exportar_pacientes,
        }


def build_container(
    config: ConfiguracionCentro | None = None,
    generador: GeneradorIdsRepositorio | None = None,
    reloj: Callable[[], datetime] = datetime.now,
) -> AppContainer:
    fabrica = FabricaRepositorios(generador)
    clave = config.clave_eliminacion if config is not None else CLAVE_ELIMINACION_POR_DEFECTO
    return AppContainer(
        fabrica=fabrica,
        citas=GestionCitas(fabrica.citas()),
        diagnosticos=GestionDiagnosticos(fabrica.diagnosticos(), reloj=reloj),
        examenes=GestionExamenes(fabrica.examenes(), reloj=reloj),
        medicos=GestionMedicos(fabrica.medicos(), clave_eliminacion=clave),
        pacientes=GestionPacientes(fabrica.pacientes(), clave_eliminacion=clave),
    )
