"""
Excepciones fatales del sync: abortan la corrida completa.
"""
from typing import Optional

from harmonica_sync.shared.exceptions.base import AppException


class ConfigurationException(AppException):
    """Excepción para archivos de configuración ausentes o inválidos."""

    def __init__(self, message: str, config_path: Optional[str] = None):
        details = {"config_path": config_path} if config_path else None
        super().__init__(
            message=message,
            error_code="CONFIG_ERROR",
            details=details
        )


class MissingCredentialException(AppException):
    """Excepción cuando falta la API key de Harmonica."""

    def __init__(self, variable_name: str):
        super().__init__(
            message=f"{variable_name} environment variable is required.",
            error_code="MISSING_CREDENTIAL",
            details={
                "variable": variable_name,
                "hint": "Get your API key from the Harmonica dashboard (Settings -> API Keys).",
            }
        )


class TemplateNotFoundException(AppException):
    """Excepción cuando el template markdown no existe."""

    def __init__(self, template_path: str):
        super().__init__(
            message=f"Template file not found: {template_path}",
            error_code="TEMPLATE_NOT_FOUND",
            details={"template_path": template_path}
        )


class ScaffoldException(AppException):
    """Excepción al generar la configuración inicial del proyecto."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            error_code="SCAFFOLD_ERROR"
        )
