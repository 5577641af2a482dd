"""CLI entrypoint for thinkspace — typer app with `serve` and `chat` commands."""

import asyncio
import json
import sys
from pathlib import Path

import structlog
import typer
import uvicorn

from thinkspace.api.infrastructure.app import create_app
from thinkspace.api.infrastructure.observer import StructlogApiObserver
from thinkspace.auth.infrastructure.static_tokens import StaticTokenSessionResolver
from thinkspace.config.domain.config import ChatConfig
from thinkspace.config.infrastructure.observer import StructlogConfigObserver
from thinkspace.config.infrastructure.yaml_loader import YamlConfigLoader
from thinkspace.conversation.application.context_builder import ContextBuilder
from thinkspace.conversation.domain.prompt import ContextOptions
from thinkspace.conversation.domain.turn import ConversationTurn, TurnRole
from thinkspace.core.errors import ThinkSpaceError
from thinkspace.generation.infrastructure.litellm import LiteLLMLanguageModel
from thinkspace.generation.infrastructure.observer import StructlogGenerationObserver
from thinkspace.knowledge.domain.category import ParaCategory
from thinkspace.knowledge.infrastructure.keyword_search import KeywordNoteSearch
from thinkspace.knowledge.infrastructure.memory_store import InMemoryKnowledgeStore
from thinkspace.knowledge.infrastructure.seed import seed_store
from thinkspace.orchestration.application.step_loop import StepLoopController
from thinkspace.orchestration.application.turn_service import ChatTurnService
from thinkspace.orchestration.infrastructure.observer import (
    StructlogOrchestrationObserver,
)
from thinkspace.streaming.domain.events import (
    ErrorEvent,
    StreamEvent,
    TextDeltaEvent,
    ToolRequestedEvent,
    ToolResultEvent,
)
from thinkspace.streaming.infrastructure.queue_sink import open_stream
from thinkspace.tools.application.catalog import create_default_registry
from thinkspace.tools.infrastructure.observer import StructlogToolObserver

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def _load_config(config_path: Path) -> ChatConfig:
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    try:
        return loader.load(path=config_path)
    except ThinkSpaceError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc


async def _build_store(config: ChatConfig, config_path: Path) -> InMemoryKnowledgeStore:
    """Create the in-memory store, seeded when the config names a seed file.

    A relative seed path is resolved against the config file's directory.
    """
    store = InMemoryKnowledgeStore()
    seed_path = config.knowledge.seed_path
    if seed_path is not None:
        if not seed_path.is_absolute():
            seed_path = config_path.parent / seed_path
        await seed_store(store=store, path=seed_path)
    return store


def _build_service(config: ChatConfig, store: InMemoryKnowledgeStore) -> ChatTurnService:
    registry = create_default_registry(
        store=store,
        search=KeywordNoteSearch(store=store),
        observer=StructlogToolObserver(),
    )
    orchestration_observer = StructlogOrchestrationObserver()
    controller = StepLoopController(
        model=LiteLLMLanguageModel(
            config=config.model, observer=StructlogGenerationObserver()
        ),
        catalog=registry,
        observer=orchestration_observer,
        step_budget=config.orchestration.step_budget,
    )
    return ChatTurnService(
        context_builder=ContextBuilder(
            history_window=config.orchestration.history_window
        ),
        controller=controller,
        observer=orchestration_observer,
    )


def _echo_event(event: StreamEvent) -> None:
    """Print one stream event in a terminal-friendly form."""
    match event:
        case TextDeltaEvent(text=text):
            typer.echo(text, nl=False)
        case ToolRequestedEvent(tool_name=name, arguments=arguments):
            typer.echo(f"\n→ {name} {json.dumps(arguments)}")
        case ToolResultEvent(tool_name=name, result=result):
            outcome = "ok" if result.success else f"failed: {result.error}"
            typer.echo(f"← {name} {outcome}")
        case ErrorEvent(message=message):
            typer.echo(f"\nError: {message}")
        case _:
            typer.echo("")


@app.command()
def serve(
    config_path: Path = typer.Argument(..., help="Path to chat config YAML"),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Serve the chat stream API over HTTP."""
    try:
        _configure_structlog(log_format=log_format)
        config = _load_config(config_path=config_path)
        store = asyncio.run(_build_store(config=config, config_path=config_path))

        api = create_app(
            service=_build_service(config=config, store=store),
            resolver=StaticTokenSessionResolver(tokens=config.auth.tokens),
            observer=StructlogApiObserver(),
        )
        uvicorn.run(
            api, host=config.server.host, port=config.server.port, log_config=None
        )
    except ThinkSpaceError as exc:
        typer.echo(str(exc))
        sys.exit(1)


@app.command()
def chat(
    config_path: Path = typer.Argument(..., help="Path to chat config YAML"),
    message: str = typer.Argument(..., help="The user turn to send"),
    user_id: str = typer.Option("local-user", "--user", help="User id to act as"),
    category: ParaCategory | None = typer.Option(
        None, "--category", help="Restrict the assistant to one PARA category"
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Run a single chat turn in the terminal and print its events."""

    async def run_once(config: ChatConfig) -> None:
        store = await _build_store(config=config, config_path=config_path)
        service = _build_service(config=config, store=store)
        sink = open_stream()
        turn = asyncio.create_task(
            service.run_turn(
                user_id=user_id,
                turns=[ConversationTurn(role=TurnRole.USER, content=message)],
                options=ContextOptions(category=category),
                sink=sink,
            )
        )
        async for event in sink:
            _echo_event(event)
        await turn

    _configure_structlog(log_format=log_format)
    config = _load_config(config_path=config_path)
    try:
        asyncio.run(run_once(config=config))
    except KeyboardInterrupt:
        typer.echo("Chat interrupted.")
        sys.exit(1)
    except ThinkSpaceError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


if __name__ == "__main__":
    app()
