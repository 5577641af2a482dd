"""Knowledge store configuration model."""

from pathlib import Path

from pydantic import BaseModel


class KnowledgeConfig(BaseModel, frozen=True):
    seed_path: Path | None = None
