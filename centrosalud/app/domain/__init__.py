from centrosalud.app.domain.citas import Cita
from centrosalud.app.domain.diagnosticos import Diagnostico
from centrosalud.app.domain.examenes import Examen
from centrosalud.app.domain.personas import DatosPersona, Medico, Paciente
from centrosalud.app.domain.enums import *  # noqa: F401,F403
from centrosalud.app.domain.exceptions import *  # noqa: F401,F403

__all__ = [
    "DatosPersona",
    "Medico",
    "Paciente",
    "Examen",
    "Diagnostico",
    "Cita",
]
