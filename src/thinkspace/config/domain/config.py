"""Top-level ChatConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from thinkspace.config.domain.auth import AuthConfig
from thinkspace.config.domain.knowledge import KnowledgeConfig
from thinkspace.config.domain.model import ModelConfig
from thinkspace.config.domain.orchestration import OrchestrationConfig
from thinkspace.config.domain.server import ServerConfig


class ChatConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a ThinkSpace chat deployment."""

    name: str = Field(min_length=1)
    model: ModelConfig
    orchestration: OrchestrationConfig = Field(default_factory=OrchestrationConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    knowledge: KnowledgeConfig = Field(default_factory=KnowledgeConfig)
