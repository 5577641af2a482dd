"""System prompt template for the ThinkSpace assistant."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from thinkspace.knowledge.domain.category import ParaCategory

_BASE_PROMPT = """\
You are ThinkSpace AI Assistant, an intelligent knowledge management assistant \
for the PARA methodology.

The PARA method organizes information into:
- Projects (P): Things with a deadline and specific outcome
- Areas (A): Ongoing responsibilities to maintain over time
- Resources (R): Topics of ongoing interest for future reference
- Archive: Inactive items from other categories

You help users search their knowledge base, create projects, draft notes, link \
ideas, and visualize their knowledge.
When users ask questions, use the search_notes tool to find relevant information.
When they want to create something, use the appropriate creation tool.
Be concise and helpful. Always cite sources when using search results."""


class ContextOptions(BaseModel):
    """What the user is looking at when they send a turn."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    category: ParaCategory | None = None
    project_title: str | None = None
    area_title: str | None = None
    resource_title: str | None = None
    note_title: str | None = None


def render_system_prompt(options: ContextOptions) -> str:
    """Render the single system instruction for a turn."""
    sections = [_BASE_PROMPT]

    if options.category is not None:
        sections.append(f"Current PARA filter: {options.category.value}")

    context_lines = [
        f"- {label}: {title}"
        for label, title in (
            ("Project", options.project_title),
            ("Area", options.area_title),
            ("Resource", options.resource_title),
            ("Note", options.note_title),
        )
        if title
    ]
    if context_lines:
        sections.append("Current context:\n" + "\n".join(context_lines))

    return "\n\n".join(sections)
