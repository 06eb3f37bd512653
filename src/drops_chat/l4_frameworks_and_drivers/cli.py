"""CLI entry point for drops-chat."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from drops_chat import __version__


@click.command()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Path to YAML config file.',
)
@click.option('--host', default=None, help='Interface to bind (overrides server.host).')
@click.option('--port', default=None, type=int, help='Port to listen on (overrides server.port).')
@click.option(
    '--log-file',
    default=None,
    type=click.Path(dir_okay=False),
    help='Write logs to this file instead of stderr.',
)
@click.version_option(version=__version__)
def cli(config_path, host, port, log_file):
    """drops-chat -- chat relay backend for the Drops portfolio assistant."""
    import uvicorn  # noqa: PLC0415 -- deferred: server stack not loaded on --help

    from drops_chat.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from drops_chat.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: openai SDK not loaded on --help
        DependencyContainer,
    )
    from drops_chat.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: not needed for --help
        InfraConfig,
        build_app_config,
    )
    from drops_chat.l4_frameworks_and_drivers.logging_setup import setup_logging  # noqa: PLC0415
    from drops_chat.l4_frameworks_and_drivers.web import create_app  # noqa: PLC0415 -- deferred: FastAPI not loaded on --help

    server_overrides: dict = {}
    if host:
        server_overrides['host'] = host
    if port is not None:
        server_overrides['port'] = port
    if log_file:
        server_overrides['log_file'] = log_file

    try:
        raw = YamlConfigLoader().load_raw(
            config_path,
            overrides={'server': server_overrides} if server_overrides else None,
        )
        config = build_app_config(raw)
        infra = InfraConfig.model_validate(raw)
    except FileNotFoundError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    server = infra.server
    setup_logging(server.log_level, Path(server.log_file) if server.log_file else None)

    container = DependencyContainer(config, infra)
    app = create_app(container)
    click.echo(f'Serving drops-chat on http://{server.host}:{server.port}', err=True)
    uvicorn.run(app, host=server.host, port=server.port, log_level=server.log_level.lower())
