from __future__ import annotations

from datetime import datetime

import pytest

from centrosalud.app.application.dtos import CitaLight, ExamenLight, MedicoLight
from centrosalud.app.domain.citas import Cita
from centrosalud.app.domain.enums import CodigoError
from centrosalud.app.domain.examenes import Examen
from centrosalud.app.domain.exceptions import ColeccionNoInicializadaError, EntidadYaExisteError, OperacionInvalidaError
from centrosalud.app.infrastructure.memoria import FabricaRepositorios, GeneradorIdsRepositorio


def test_ids_de_repositorio_por_tipo_y_reiniciables(generador: GeneradorIdsRepositorio) -> None:
    fabrica = FabricaRepositorios(generador)

    assert [fabrica.citas().repositorio_id, fabrica.citas().repositorio_id] == [1, 2]
    assert fabrica.examenes().repositorio_id == 1

    assert generador.actual("citas") == 2
    assert generador.actual("medicos") == 0

    generador.reiniciar()
    assert generador.actual("citas") == 0
    assert fabrica.citas().repositorio_id == 1


def test_generadores_independientes() -> None:
    primera = FabricaRepositorios(GeneradorIdsRepositorio())
    segunda = FabricaRepositorios(GeneradorIdsRepositorio())

    primera.medicos()
    assert segunda.medicos().repositorio_id == 1


def test_add_no_comprueba_duplicados_y_get_by_id_devuelve_el_primero(fabrica) -> None:
    repo = fabrica.citas()
    primera = Cita(id=1, paciente_id=1)
    segunda = Cita(id=1, paciente_id=2)

    assert repo.add(primera) is True
    assert repo.add(segunda) is True

    assert len(repo) == 2
    assert repo.get_by_id(1) is primera


def test_remove_quita_solo_la_primera_coincidencia(fabrica) -> None:
    repo = fabrica.citas()
    repo.add(Cita(id=1, paciente_id=1))
    repo.add(Cita(id=1, paciente_id=2))

    assert repo.remove(1) is True

    assert [c.paciente_id for c in repo.list_all()] == [2]


def test_remove_de_examen_por_id_y_no_por_igualdad(fabrica) -> None:
    repo = fabrica.examenes()
    # Dos exámenes "iguales" (mismo tipo y coste) con ids distintos.
    repo.add(Examen(id=1, tipo="Hemograma", coste=10.0))
    repo.add(Examen(id=2, tipo="Hemograma", coste=10.0))

    assert repo.remove(2) is True

    assert [e.id for e in repo.list_all()] == [1]


def test_remove_de_id_ausente_devuelve_false(fabrica) -> None:
    assert fabrica.pacientes().remove(5) is False


def test_coleccion_no_inicializada(fabrica) -> None:
    repo = fabrica.examenes()
    repo._items = None

    with pytest.raises(ColeccionNoInicializadaError) as excinfo:
        repo.get_by_id(1)
    assert excinfo.value.codigo == CodigoError.COLECCION_NO_INICIALIZADA
    with pytest.raises(ColeccionNoInicializadaError):
        repo.remove(1)
    assert repo.ordenar_por_coste() is False


def test_add_light_duplicado(fabrica) -> None:
    repo = fabrica.citas()
    repo.add_light(CitaLight(id=1, paciente_id=2, medico_id=3, fecha=datetime(2030, 1, 1)))

    with pytest.raises(EntidadYaExisteError):
        repo.add_light(CitaLight(id=1, paciente_id=9, medico_id=9))

    assert len(repo) == 1
    assert repo.get_by_id(1) == Cita(id=1, fecha=datetime(2030, 1, 1), paciente_id=2, medico_id=3)


def test_add_light_falla_si_add_falla(fabrica, monkeypatch) -> None:
    repo = fabrica.medicos()
    monkeypatch.setattr(repo, "add", lambda item: False)

    with pytest.raises(OperacionInvalidaError):
        repo.add_light(MedicoLight(id=3))


def test_get_light_conserva_medico_en_la_cita(fabrica) -> None:
    repo = fabrica.citas()
    repo.add_light(CitaLight(id=1, paciente_id=2, medico_id=7, fecha=datetime(2030, 1, 1)))

    assert repo.get_light(1).medico_id == 7
    assert repo.get_light(2) is None


def test_examenes_coste_total_y_orden_estable(fabrica) -> None:
    repo = fabrica.examenes()
    for examen_id, coste in [(1, 5.0), (2, 1.0), (3, 5.0), (4, 2.5)]:
        repo.add_light(ExamenLight(id=examen_id, tipo=f"t{examen_id}", coste=coste))

    assert repo.calcular_coste_total() == pytest.approx(13.5)
    assert repo.ordenar_por_coste() is True
    assert [e.id for e in repo.list_all()] == [2, 4, 1, 3]


def test_examenes_actualizar_en_id_ausente(fabrica) -> None:
    repo = fabrica.examenes()

    assert repo.actualizar_coste(1, 10.0) is False
    assert repo.actualizar_resultado(1, "ok") is False
    assert repo.calcular_coste_total() == 0


def test_diagnosticos_agregar_texto_en_id_ausente(fabrica) -> None:
    assert fabrica.diagnosticos().agregar_texto_descripcion(1, "texto") is False
