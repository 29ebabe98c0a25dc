# domain/exceptions.py
"""
Excepciones del dominio.

Propósito:
- Distinguir errores de reglas de negocio (dominio) de errores técnicos (ficheros/CLI).
- Permitir que la capa de aplicación/CLI traduzca errores a mensajes para el usuario.

Tres errores llevan un código numérico fijo (ver CodigoError):
- EntidadYaExisteError (123)
- MedicoNoAutorizadoError (101)
- ColeccionNoInicializadaError (0)
"""

from __future__ import annotations

from centrosalud.app.domain.enums import CodigoError


class DomainError(Exception):
    """Error base del dominio."""


class ValidationError(DomainError):
    """Argumento con valor inválido (p. ej., diagnóstico con fecha pasada)."""


class ArgumentoNuloError(ValidationError):
    """Falta un argumento obligatorio (registro light o identidad)."""

    def __init__(self, parametro: str) -> None:
        super().__init__(f"Argumento obligatorio ausente: {parametro}.")
        self.parametro = parametro


class AuthorizationError(DomainError):
    """Operación denegada por falta de permisos de quien la solicita."""


class MedicoNoAutorizadoError(AuthorizationError):
    codigo = CodigoError.MEDICO_NO_AUTORIZADO

    def __init__(self, operacion: str | None = None) -> None:
        detalle = f" para '{operacion}'" if operacion else ""
        super().__init__(f"El médico no está autorizado a tomar decisiones{detalle}.")
        self.operacion = operacion


class EntidadYaExisteError(DomainError):
    codigo = CodigoError.ENTIDAD_YA_EXISTE

    def __init__(self, entidad: str, entidad_id: int) -> None:
        super().__init__(f"Ya existe {entidad} con id {entidad_id}.")
        self.entidad = entidad
        self.entidad_id = entidad_id


class ColeccionNoInicializadaError(DomainError):
    """La colección del repositorio nunca se inicializó (distinto de vacía)."""

    codigo = CodigoError.COLECCION_NO_INICIALIZADA

    def __init__(self, repositorio: str) -> None:
        super().__init__(f"La colección de {repositorio} no está inicializada.")
        self.repositorio = repositorio


class OperacionInvalidaError(DomainError):
    """El repositorio rechazó una operación que debía aceptar."""


class ExportacionError(DomainError):
    """Fallo al escribir o leer un snapshot; solo conserva el mensaje original."""
