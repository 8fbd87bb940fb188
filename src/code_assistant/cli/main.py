"""Main CLI entry point for code-assistant.

Provides programming-help commands backed by the configured provider:
    code-assistant explain <topic>
    code-assistant debug --error <text> [code-file]
    code-assistant generate <description>
"""

import asyncio
import logging
import sys
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any, TextIO

import click

from .. import __version__
from ..assistant import Assistant
from ..llm import LLMConfig, LLMError


def run_async(coro: Any) -> Any:
    """Run an async coroutine synchronously."""
    return asyncio.run(coro)


def load_config(options: dict[str, Any]) -> LLMConfig:
    """Resolve config from --config-file or the environment, then apply overrides."""
    provider = options.get("provider")
    config_file = options.get("config_file")
    if config_file:
        config = LLMConfig.from_file(config_file, provider=provider)
    else:
        config = LLMConfig.from_env(provider=provider)

    if options.get("model"):
        config = config.model_copy(update={"model": options["model"]})
    return config


def _ask(ctx: click.Context, operation: Callable[[Assistant], Awaitable[str]]) -> None:
    """Build an assistant from CLI options, run one operation and print the reply."""
    options = ctx.obj

    async def _run() -> str:
        async with Assistant.from_config(
            load_config(options), language=options["language"]
        ) as assistant:
            return await operation(assistant)

    try:
        reply = run_async(_run())
    except LLMError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(reply)


@click.group()
@click.version_option(version=__version__, prog_name="code-assistant")
@click.option(
    "--provider",
    "-p",
    type=click.Choice(["openai", "anthropic"]),
    help="Provider (default: LLM_PROVIDER, or openai when OPENAI_API_KEY is set)",
)
@click.option("--model", "-m", help="Model identifier override")
@click.option(
    "--config-file",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON or YAML config file (default: environment variables)",
)
@click.option("--language", "-l", default="Rust", show_default=True, help="Programming language")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    provider: str | None,
    model: str | None,
    config_file: Path | None,
    language: str,
    verbose: bool,
) -> None:
    """code-assistant - programming help from OpenAI or Anthropic models.

    \b
    Configuration comes from environment variables unless --config-file
    is given:
        OPENAI_API_KEY / ANTHROPIC_API_KEY
        LLM_PROVIDER, DEFAULT_AI_MODEL, MAX_TOKENS, TEMPERATURE
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {
        "provider": provider,
        "model": model,
        "config_file": config_file,
        "language": language,
    }


@cli.command()
@click.argument("topic")
@click.pass_context
def explain(ctx: click.Context, topic: str) -> None:
    """Explain a programming concept.

    \b
    Examples:
        code-assistant explain ownership
        code-assistant --language Python explain generators
    """
    _ask(ctx, lambda assistant: assistant.explain(topic))


@cli.command()
@click.argument("code_file", type=click.File("r"), default="-")
@click.option("--error", "-e", "error_text", required=True, help="Compiler or runtime error")
@click.pass_context
def debug(ctx: click.Context, code_file: TextIO, error_text: str) -> None:
    """Explain an error in a piece of code and suggest a fix.

    Reads the code from CODE_FILE, or from stdin when omitted.

    \b
    Examples:
        code-assistant debug src/main.rs -e "borrow of moved value: `s`"
        cat snippet.rs | code-assistant debug -e "mismatched types"
    """
    code = code_file.read()
    _ask(ctx, lambda assistant: assistant.debug_code(code, error_text))


@cli.command()
@click.argument("description")
@click.pass_context
def generate(ctx: click.Context, description: str) -> None:
    """Generate commented code for a requirement.

    \b
    Examples:
        code-assistant generate "a thread-safe counter"
    """
    _ask(ctx, lambda assistant: assistant.generate_code(description))


if __name__ == "__main__":
    cli()
