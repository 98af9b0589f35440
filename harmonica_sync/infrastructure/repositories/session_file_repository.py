"""
Repositorio de sesiones sincronizadas sobre el filesystem.

El directorio de salida es el único estado persistente: los IDs ya
sincronizados se deducen del token hst_<hex> embebido en cada nombre de archivo.
"""
from pathlib import Path

from loguru import logger

from harmonica_sync.shared.constants.session_constants import SESSION_FILE_ID_PATTERN


class SessionFileRepository:
    """
    Acceso al directorio de salida de markdowns.
    """

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)

    def load_existing_ids(self) -> set[str]:
        """
        Crea el directorio si no existe y retorna los IDs ya presentes.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        ids: set[str] = set()
        for entry in self.output_dir.iterdir():
            match = SESSION_FILE_ID_PATTERN.search(entry.name)
            if match:
                ids.add(match.group(1))
        return ids

    def write(self, filename: str, content: str) -> Path:
        """
        Escribe el markdown. Si ya existe un archivo con ese nombre exacto
        se sobreescribe.
        """
        path = self.output_dir / filename
        if path.exists():
            logger.debug(f"Sobreescribiendo archivo existente: {path}")
        path.write_text(content, encoding="utf-8")
        return path
