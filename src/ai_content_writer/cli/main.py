"""ai-content-writer CLI entry point."""
from __future__ import annotations

import logging
import sys

import click

from ai_content_writer import __version__
from ai_content_writer.catalog import DEFAULT_MODELS_DIR, ModelCatalog
from ai_content_writer.config import Settings
from ai_content_writer.errors import ContentWriterError
from ai_content_writer.pipeline import GenerationPipeline
from ai_content_writer.types.context import GenerationContext
from ai_content_writer.types.enums import ContentFormat

TEST_PROMPT = "Write exactly one sentence describing what makes a good website."


@click.group()
@click.version_option(version=__version__, prog_name="ai-content-writer")
@click.option(
    "--config-dir",
    default=str(DEFAULT_MODELS_DIR),
    show_default=True,
    type=click.Path(file_okay=False),
    help="Directory of model descriptor YAML files",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_dir: str, verbose: bool) -> None:
    """AI content writer: generate CMS field content with language models."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = ModelCatalog(config_dir)


@cli.command()
@click.option("--all", "show_all", is_flag=True, help="Include text-only and hidden models")
@click.pass_obj
def models(catalog: ModelCatalog, show_all: bool) -> None:
    """List configured models, highest priority first."""
    if show_all:
        entries = sorted(catalog.list_all(), key=lambda m: m.ui_display.priority, reverse=True)
    else:
        entries = catalog.list_vision_capable()

    if not entries:
        click.echo("No models configured")
        return

    for model in entries:
        params = model.api_parameters
        badge = f" [{model.ui_display.badge}]" if model.ui_display.badge else ""
        click.echo(
            f"{model.id:<20} {model.name}{badge} "
            f"({params.token_parameter}={params.default_token_limit})"
        )


@cli.command()
@click.pass_obj
def validate(catalog: ModelCatalog) -> None:
    """Validate model descriptor files.

    Exits with code 1 if any descriptor is invalid.
    """
    issues = catalog.validate()
    if not issues:
        click.echo(f"OK: {len(catalog)} model configuration(s) valid")
        sys.exit(0)

    click.echo("Configuration errors found:", err=True)
    for issue in issues:
        click.echo(f"  - {issue}", err=True)
    sys.exit(1)


@cli.command("test")
@click.option("--model", "model_id", default=None, help="Only test this model")
@click.pass_obj
def test_models(catalog: ModelCatalog, model_id: str | None) -> None:
    """Run a one-sentence generation against every configured model.

    Makes real API calls using settings from the environment.
    """
    issues = catalog.validate()
    if issues:
        click.echo("Configuration errors found:", err=True)
        for issue in issues:
            click.echo(f"  - {issue}", err=True)
        sys.exit(2)

    ordered = sorted(catalog.list_all(), key=lambda m: m.ui_display.priority, reverse=True)
    model_ids = [m.id for m in ordered]
    if model_id is not None:
        if model_id not in catalog:
            click.echo(f"Model '{model_id}' not found.", err=True)
            click.echo(f"Available models: {', '.join(model_ids)}")
            sys.exit(1)
        model_ids = [model_id]

    settings = Settings.from_env()
    pipeline = GenerationPipeline(catalog)
    context = GenerationContext(format=ContentFormat.PLAIN)

    click.echo(f"Testing {len(model_ids)} model(s)...")
    results = []
    try:
        for mid in model_ids:
            result = pipeline.generate_with_model(mid, TEST_PROMPT, context, settings)
            results.append(result)
            if result.success:
                content = result.content
                if len(content) > 80:
                    content = content[:80] + "..."
                click.echo(
                    f"  {mid}... OK {result.duration}s, {result.usage.total_tokens} tokens"
                )
                click.echo(f'    "{content}"')
            else:
                click.echo(f"  {mid}... FAILED {result.duration}s - {result.error}")
    finally:
        pipeline.close()

    passed = [r for r in results if r.success]
    failed = len(results) - len(passed)
    click.echo()
    if failed == 0:
        click.echo(f"All {len(passed)} models passed")
    else:
        click.echo(f"Results: {len(passed)} passed, {failed} failed")
    if passed:
        avg = round(sum(r.duration for r in passed) / len(passed), 2)
        click.echo(f"Avg response: {avg}s")

    sys.exit(0 if failed == 0 else 1)


@cli.command()
@click.argument("prompt")
@click.option("--model", "model_id", default=None, help="Model id (defaults to settings)")
@click.option(
    "--format",
    "fmt",
    type=click.Choice([f.value for f in ContentFormat]),
    default=ContentFormat.PLAIN.value,
    show_default=True,
    help="Target content format",
)
@click.option("--field", "field_handle", default=None, help="Target field handle")
@click.option("--entry-type", "entry_type", default=None, help="Entry type handle")
@click.pass_obj
def generate(
    catalog: ModelCatalog,
    prompt: str,
    model_id: str | None,
    fmt: str,
    field_handle: str | None,
    entry_type: str | None,
) -> None:
    """Generate content for PROMPT and print it."""
    settings = Settings.from_env()
    context = GenerationContext(
        entry_type_handle=entry_type,
        field_handle=field_handle,
        format=ContentFormat(fmt),
    )
    pipeline = GenerationPipeline(catalog)
    try:
        content = pipeline.generate(prompt, model_id, context, settings)
    except ContentWriterError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    finally:
        pipeline.close()
    click.echo(content)
