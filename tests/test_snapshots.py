from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

import pytest

from centrosalud.app.application.dtos import DiagnosticoLight, PacienteLight
from centrosalud.app.domain.exceptions import ExportacionError
from centrosalud.app.infrastructure.memoria.snapshots import FORMATO_SNAPSHOT, leer_snapshot


def test_exportar_sobrescribe_el_fichero(fabrica, tmp_path: Path) -> None:
    repo = fabrica.pacientes()
    destino = tmp_path / "pacientes.json"
    destino.write_text("contenido anterior", encoding="utf-8")
    repo.add_light(PacienteLight(id=1, nombre="Ana", num_utente=5))

    assert repo.exportar(destino) is True

    data = json.loads(destino.read_text(encoding="utf-8"))
    assert data["formato"] == FORMATO_SNAPSHOT
    assert data["items"][0]["persona"]["nombre"] == "Ana"


def test_importar_recupera_la_coleccion(fabrica, tmp_path: Path) -> None:
    origen = fabrica.diagnosticos()
    origen.add_light(DiagnosticoLight(id=1, fecha=datetime(2030, 2, 1, 8), cita_id=4, descripcion="Asma"))
    origen.add_light(DiagnosticoLight(id=2, fecha=datetime(2030, 2, 2, 8)))
    destino = tmp_path / "diagnosticos.json"
    origen.exportar(destino)

    copia = fabrica.diagnosticos()
    assert copia.importar(destino) == 2

    assert copia.list_all() == origen.list_all()
    assert copia.obtener_cita_id(1) == 4


def test_importar_rechaza_otro_tipo(fabrica, tmp_path: Path) -> None:
    destino = tmp_path / "pacientes.json"
    fabrica.pacientes().exportar(destino)

    with pytest.raises(ExportacionError):
        fabrica.medicos().importar(destino)


def test_leer_snapshot_rechaza_json_ajeno(tmp_path: Path) -> None:
    ruta = tmp_path / "otro.json"
    ruta.write_text(json.dumps({"items": []}), encoding="utf-8")

    with pytest.raises(ExportacionError):
        leer_snapshot(ruta)


def test_leer_snapshot_inexistente(tmp_path: Path) -> None:
    with pytest.raises(ExportacionError):
        leer_snapshot(tmp_path / "no-existe.json")


def test_importar_items_corruptos(fabrica, tmp_path: Path) -> None:
    ruta = tmp_path / "citas.json"
    ruta.write_text(
        json.dumps({"formato": FORMATO_SNAPSHOT, "tipo": "citas", "repositorio_id": 1, "items": [{"fecha": "x"}]}),
        encoding="utf-8",
    )

    with pytest.raises(ExportacionError):
        fabrica.citas().importar(ruta)


def test_leer_snapshot_con_repositorio_id_no_numerico(tmp_path: Path) -> None:
    ruta = tmp_path / "citas.json"
    ruta.write_text(
        json.dumps({"formato": FORMATO_SNAPSHOT, "tipo": "citas", "repositorio_id": "uno", "items": []}),
        encoding="utf-8",
    )

    with pytest.raises(ExportacionError, match="repositorio_id"):
        leer_snapshot(ruta)
