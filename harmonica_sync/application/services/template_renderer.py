"""
Renderizado de sesiones a markdown con templates Mustache (chevron).

El template por defecto se obtiene de un locator inyectado, de modo que
el renderer no depende de dónde está instalado el paquete.
"""
from importlib import resources
from pathlib import Path
from typing import Callable, Optional

import chevron

from harmonica_sync.application.dto.template_dto import TemplateDataDTO
from harmonica_sync.core.config import Settings
from harmonica_sync.shared.constants.session_constants import DEFAULT_TEMPLATE_FILENAME
from harmonica_sync.shared.exceptions.domain import TemplateNotFoundException

TemplateLocator = Callable[[], Path]


def bundled_template_path() -> Path:
    """Ruta del template incluido en el paquete."""
    return Path(str(resources.files("harmonica_sync") / "templates" / DEFAULT_TEMPLATE_FILENAME))


def build_template_locator(settings: Settings) -> TemplateLocator:
    """
    Locator del template por defecto: HARMONICA_TEMPLATE_PATH si está
    definido, si no el template empaquetado.
    """
    if settings.HARMONICA_TEMPLATE_PATH:
        override = Path(settings.HARMONICA_TEMPLATE_PATH).expanduser()
        return lambda: override
    return bundled_template_path


class TemplateRenderer:
    """
    Renderiza TemplateDataDTO con chevron.

    Soporta variables, secciones por truthiness/iteración de listas y
    salida sin escapar con {{{triple llave}}}.
    """

    def __init__(self, default_template_locator: TemplateLocator = bundled_template_path):
        self._default_template_locator = default_template_locator

    def resolve_template_path(self, template_path: Optional[Path] = None) -> Path:
        resolved = Path(template_path) if template_path else self._default_template_locator()
        if not resolved.is_file():
            raise TemplateNotFoundException(str(resolved))
        return resolved

    def render(self, data: TemplateDataDTO, template_path: Optional[Path] = None) -> str:
        """
        Renderiza la sesión.

        Raises:
            TemplateNotFoundException: si el template explícito o el default no existe
        """
        resolved = self.resolve_template_path(template_path)
        template = resolved.read_text(encoding="utf-8")
        return chevron.render(template, data.model_dump())
