"""CLI entry point for code-convert."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import click

from code_convert import __version__
from code_convert.l1_entities.conversion import ConversionResult


def derive_output_path(input_path: Path, target_extension: str) -> Path:
    """Swap the input's suffix for the target extension (append when there is none)."""
    if input_path.suffix:
        return input_path.with_suffix(target_extension)
    return input_path.with_name(input_path.name + target_extension)


def _print_summary(result: ConversionResult, config) -> None:
    conversion = config.conversion
    click.echo('\nComparison:')
    click.echo(f'Original {conversion.source_language} file size: {result.input_size} bytes')
    click.echo(f'New {conversion.target_language} file size: {result.output_size} bytes')
    click.echo(f'\nPreview of the {conversion.target_language} file (first {len(result.preview)} lines):')
    click.echo('\n'.join(result.preview))


@click.command()
@click.argument('input_file', required=False, type=click.Path())
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(),
    help='Path to YAML config file.',
)
@click.option(
    '--token',
    default=None,
    help='Bearer token for the model API (defaults to the GITHUB_TOKEN environment variable).',
)
@click.option(
    '--debug',
    is_flag=True,
    default=False,
    help='Write a debug log next to the output file.',
)
@click.version_option(version=__version__)
def cli(input_file, config_path, token, debug):
    """code-convert -- convert INPUT_FILE with a hosted LLM and write the result beside it."""
    if not input_file:
        click.echo('Usage: convert <inputFile>', err=True)
        sys.exit(1)

    from pydantic import ValidationError  # noqa: PLC0415 -- deferred: not needed for --help
    from yaml import YAMLError  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help

    from code_convert.l1_entities.conversion import ConversionRequest  # noqa: PLC0415 -- deferred: not needed for --help
    from code_convert.l1_entities.errors import ConversionError, OutputPathConflictError  # noqa: PLC0415 -- deferred: not needed for --help
    from code_convert.l2_use_cases.convert_use_case import (  # noqa: PLC0415 -- deferred: not needed for --help
        resolve_credential,
    )
    from code_convert.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
        find_default_config,
    )
    from code_convert.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: openai SDK not loaded on --help
        DependencyContainer,
    )
    from code_convert.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: not needed for --help
        InfraConfig,
        build_app_config,
    )

    if config_path is None and find_default_config() is None:
        # only a settings file can rename the token variable
        try:
            resolve_credential(token, os.environ, InfraConfig().github.token_env)
        except ConversionError as e:
            click.echo(f'Error: {e}', err=True)
            sys.exit(1)

    try:
        raw = YamlConfigLoader().load_raw(config_path)
        config = build_app_config(raw)
        infra = InfraConfig.model_validate(raw)
    except (OSError, ValueError, YAMLError, ValidationError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    input_path = Path(input_file)
    output_path = derive_output_path(input_path, config.conversion.target_extension)
    if os.path.abspath(output_path) == os.path.abspath(input_path):
        click.echo(f'Error: {OutputPathConflictError(output_path)}', err=True)
        sys.exit(1)

    if debug:
        from code_convert.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: only with --debug
            setup_file_logging,
        )

        setup_file_logging(output_path.parent if output_path.parent.is_dir() else Path.cwd())

    click.echo(f'Starting conversion of {input_path} to {output_path}...')
    container = DependencyContainer(
        config,
        Path.cwd(),
        infra=infra,
        on_progress=click.echo,
        on_warning=lambda msg: click.echo(f'Warning: {msg}', err=True),
    )
    request = ConversionRequest(input_path=input_path, output_path=output_path, credential=token)

    try:
        result = container.use_case.execute(request)
    except ConversionError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    _print_summary(result, config)
