"""
Configuracion central de la aplicacion.
Gestiona variables de entorno: credenciales de Harmonica y logging.
La configuracion del sync en si (busquedas, filtros, salida) vive en
harmonica.config.json y se carga con application/services/config_loader.py.
"""
from pydantic_settings import BaseSettings
from pydantic import Field, computed_field

from harmonica_sync.shared.constants.session_constants import DEFAULT_API_URL


class Settings(BaseSettings):
    """
    Clase de configuracion de la aplicacion.
    Lee variables de entorno y proporciona valores por defecto.

    - HARMONICA_API_KEY: obligatoria para sincronizar (no para --init/--help)
    - HARMONICA_API_URL: host de la API, por defecto produccion
    - HARMONICA_TEMPLATE_PATH: template por defecto alternativo al empaquetado
    """

    # API de Harmonica
    HARMONICA_API_KEY: str = Field(default="")
    HARMONICA_API_URL: str = Field(default=DEFAULT_API_URL)

    # Templates
    HARMONICA_TEMPLATE_PATH: str = Field(default="")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE: str = Field(default="")

    @computed_field
    @property
    def effective_api_url(self) -> str:
        """URL de la API, usando el default si la variable viene vacia."""
        return self.HARMONICA_API_URL or DEFAULT_API_URL

    class Config:
        """Configuracion de Pydantic."""
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


# Instancia global de configuracion
settings = Settings()
