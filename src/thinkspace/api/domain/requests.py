"""Request bodies accepted by the chat HTTP API."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from thinkspace.conversation.domain.prompt import ContextOptions
from thinkspace.conversation.domain.turn import ConversationTurn
from thinkspace.knowledge.domain.category import ParaCategory


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class ViewingContext(_CamelModel):
    project_title: str | None = None
    area_title: str | None = None
    resource_title: str | None = None
    note_title: str | None = None


class ChatStreamRequest(_CamelModel):
    messages: list[ConversationTurn] = Field(min_length=1)
    category: ParaCategory | None = None
    context: ViewingContext | None = None

    def context_options(self) -> ContextOptions:
        viewing = self.context or ViewingContext()
        return ContextOptions(
            category=self.category,
            project_title=viewing.project_title,
            area_title=viewing.area_title,
            resource_title=viewing.resource_title,
            note_title=viewing.note_title,
        )
