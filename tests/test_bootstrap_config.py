from __future__ import annotations

from pathlib import Path

from centrosalud.app.bootstrap import cargar_configuracion, resolve_data_dir


def test_resolve_data_dir_uses_arg_over_env(monkeypatch) -> None:
    monkeypatch.setenv("CENTROSALUD_DATA_DIR", "/tmp/from-env")

    resolved = resolve_data_dir("./data/from-arg", emit_log=False)

    assert resolved == Path("./data/from-arg").resolve()


def test_resolve_data_dir_uses_env_when_no_arg(monkeypatch) -> None:
    monkeypatch.setenv("CENTROSALUD_DATA_DIR", "/tmp/from-env")

    assert resolve_data_dir(None, emit_log=False) == Path("/tmp/from-env").resolve()


def test_resolve_data_dir_default(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.delenv("CENTROSALUD_DATA_DIR", raising=False)
    monkeypatch.chdir(tmp_path)

    assert resolve_data_dir(None, emit_log=False) == (tmp_path / "data").resolve()


def test_cargar_configuracion_desde_entorno(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CENTROSALUD_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("CENTROSALUD_CLAVE_ELIMINACION", "4321")
    monkeypatch.setenv("CENTROSALUD_LOG_LEVEL", "debug")
    monkeypatch.setenv("CENTROSALUD_LOG_JSON", "yes")

    config = cargar_configuracion()

    assert config.data_dir == tmp_path.resolve()
    assert config.clave_eliminacion == "4321"
    assert config.log_level == "DEBUG"
    assert config.log_json is True
    assert config.ruta_snapshot("citas") == tmp_path.resolve() / "citas.json"


def test_cargar_configuracion_por_defecto(monkeypatch, tmp_path: Path) -> None:
    for var in ("CENTROSALUD_DATA_DIR", "CENTROSALUD_CLAVE_ELIMINACION", "CENTROSALUD_LOG_LEVEL", "CENTROSALUD_LOG_JSON"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)

    config = cargar_configuracion(log_level_arg="warning", json_logs_arg=False)

    assert config.clave_eliminacion == "0000"
    assert config.log_level == "WARNING"
    assert config.log_json is False
