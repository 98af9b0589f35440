"""
Entidad de dominio: CandidateSession.
"""
from dataclasses import dataclass, field

from harmonica_sync.infrastructure.external.harmonica.types import SessionSummary


@dataclass
class CandidateSession:
    """
    Sesión encontrada por la búsqueda junto con las queries que la encontraron.

    matched_queries conserva el orden de primera aparición y no repite valores;
    se usa como lista de tags en el template.
    """

    summary: SessionSummary
    matched_queries: list[str] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.summary.id

    def add_query(self, query: str) -> None:
        """Registra una query que encontró la sesión (idempotente)."""
        if query not in self.matched_queries:
            self.matched_queries.append(query)
