from __future__ import annotations

from centrosalud.app.common.log_redaction import redact_text, redact_value


def test_redact_text_masks_email_utente_and_phone() -> None:
    text = "Contacto: ana.ruiz@example.com utente 123456789 tel +351 912 345 678"

    redacted = redact_text(text)

    assert "ana.ruiz@example.com" not in redacted
    assert "123456789" not in redacted
    assert "+351 912 345 678" not in redacted
    assert redacted.count("***") >= 3


def test_redact_text_keeps_short_ids() -> None:
    assert redact_text("cita_id=3 medico_id=12") == "cita_id=3 medico_id=12"


def test_redact_value_masks_sensitive_keys_recursively() -> None:
    payload = {
        "nombre": "Jorge",
        "diagnostico": {"descripcion": "Gripe", "cita_id": 4},
        "items": [{"num_utente": "111222333"}],
    }

    redacted = redact_value(payload)

    assert redacted["nombre"] == "***"
    assert redacted["diagnostico"]["descripcion"] == "***"
    assert redacted["diagnostico"]["cita_id"] == 4
    assert redacted["items"][0]["num_utente"] == "***"
