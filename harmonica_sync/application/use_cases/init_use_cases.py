"""
Caso de uso --init: genera harmonica.config.json y un template inicial.
"""
import json
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from harmonica_sync.application.dto.config_dto import (
    OutputSectionDTO,
    SyncConfigDTO,
    SyncSectionDTO,
)
from harmonica_sync.shared.constants.session_constants import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_TEMPLATE_FILENAME,
)
from harmonica_sync.shared.exceptions.domain import ScaffoldException

# Se usa solo si el template empaquetado no está disponible
MINIMAL_TEMPLATE = """---
title: "{{{topic}}}"
date: {{date}}
session_id: {{id}}
participants: {{participant_count}}
status: {{status}}
---

# {{topic}}

**Goal:** {{goal}}

{{#summary}}
## Summary

{{{summary}}}
{{/summary}}
"""


def starter_config() -> SyncConfigDTO:
    """Configuración de ejemplo que el usuario edita después del init."""
    return SyncConfigDTO(
        sync=SyncSectionDTO(
            search=["your search query here"],
            keywords=["optional", "relevance", "keywords"],
            min_participants=1,
            require_summary=True,
        ),
        output=OutputSectionDTO(
            dir="sessions",
            filename="{{date}}-{{id}}.md",
            template=f"./{DEFAULT_TEMPLATE_FILENAME}",
        ),
    )


@dataclass(frozen=True)
class InitResult:
    created: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)


class ProjectInitializer:
    """
    Genera los archivos iniciales de un proyecto de sync en target_dir.
    """

    def __init__(self, target_dir: Path, template_source: Path):
        self.target_dir = Path(target_dir)
        self.template_source = Path(template_source)

    def run(self) -> InitResult:
        """
        Raises:
            ScaffoldException: si harmonica.config.json ya existe
        """
        config_path = self.target_dir / DEFAULT_CONFIG_FILENAME
        template_path = self.target_dir / DEFAULT_TEMPLATE_FILENAME

        if config_path.exists():
            raise ScaffoldException(
                f"{config_path} already exists. Remove it first if you want to reinitialize."
            )

        self.target_dir.mkdir(parents=True, exist_ok=True)
        created: list[Path] = []
        skipped: list[Path] = []

        payload = starter_config().model_dump(by_alias=True)
        config_path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        created.append(config_path)
        logger.info(f"Created: {config_path.name}")

        if template_path.exists():
            skipped.append(template_path)
            logger.info(f"Skipped: {template_path.name} (already exists)")
        else:
            if self.template_source.is_file():
                shutil.copyfile(self.template_source, template_path)
            else:
                logger.warning(
                    f"Default template not found at {self.template_source}, writing a minimal one"
                )
                template_path.write_text(MINIMAL_TEMPLATE, encoding="utf-8")
            created.append(template_path)
            logger.info(f"Created: {template_path.name}")

        return InitResult(created=created, skipped=skipped)
