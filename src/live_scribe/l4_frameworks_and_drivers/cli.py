"""CLI entry point for live-scribe."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click

from live_scribe import __version__
from live_scribe.l1_entities.languages import APP_LANGUAGES, RECOGNITION_LANGUAGES
from live_scribe.l1_entities.recording import SIMULATION_SPEEDS_MS, RecordingMode, SessionState


class TranscriptPrinter:
    """Echoes newly committed text and the current interim as a session changes."""

    def __init__(self, echo=click.echo) -> None:
        self._echo = echo
        self._committed = ''
        self._interim = ''
        self._error: str | None = None

    def __call__(self, snapshot) -> None:
        if snapshot.committed_text != self._committed:
            if snapshot.committed_text.startswith(self._committed):
                added = snapshot.committed_text[len(self._committed) :].strip()
            else:
                added = snapshot.committed_text
            if added:
                confidence = '' if snapshot.confidence is None else f' ({snapshot.confidence:.0%})'
                self._echo(f'{added}{confidence}')
            self._committed = snapshot.committed_text
        if snapshot.processing and snapshot.pending_interim and snapshot.pending_interim != self._interim:
            self._echo(click.style(f'  … {snapshot.pending_interim}', dim=True))
        self._interim = snapshot.pending_interim
        if snapshot.last_error and snapshot.last_error != self._error:
            self._echo(click.style(f'Error: {snapshot.last_error}', fg='red'), err=True)
        self._error = snapshot.last_error


async def _record(container, mode: RecordingMode, language: str | None, speed: int | None, duration: float | None):
    printer = TranscriptPrinter()
    stop_requested = asyncio.Event()

    def _on_change(snapshot) -> None:
        printer(snapshot)
        if snapshot.state == SessionState.ERRORED:
            stop_requested.set()

    session = container.build_session(mode=mode, language=language, on_change=_on_change)
    if speed is not None:
        session.set_simulation_speed(speed)
    try:
        await session.start()
        if duration is None:
            await stop_requested.wait()
        else:
            try:
                await asyncio.wait_for(stop_requested.wait(), timeout=duration)
            except asyncio.TimeoutError:
                pass
    finally:
        session.teardown()
    return session.transcript.committed_text


def _load(ctx: click.Context):
    from live_scribe.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: pydantic models not needed for --help
        InfraConfig,
        build_app_config,
    )

    raw = ctx.obj['raw']
    return build_app_config(raw), InfraConfig.model_validate(raw)


@click.group()
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True),
    help='Path to YAML config file.',
)
@click.option('-v', '--verbose', is_flag=True, help='Enable debug logging.')
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, config_path, verbose):
    """live-scribe -- live speech transcription and summarization."""
    from live_scribe.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )

    try:
        raw = YamlConfigLoader().load_raw(config_path, overrides={'logging': {'level': 'DEBUG'}} if verbose else None)
    except FileNotFoundError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)
    ctx.ensure_object(dict)
    ctx.obj['raw'] = raw


def _configure_logging(config) -> None:
    from live_scribe.l4_frameworks_and_drivers.logging_setup import setup_logging  # noqa: PLC0415

    setup_logging(config.logging.level, Path(config.logging.file) if config.logging.file else None)


@cli.command()
@click.option('--host', default=None, help='Bind address (defaults to config server.host).')
@click.option('--port', default=None, type=int, help='Bind port (defaults to config server.port).')
@click.pass_context
def serve(ctx, host, port):
    """Serve the /transcribe and /summarize HTTP endpoints."""
    import uvicorn  # noqa: PLC0415 -- deferred: server stack not loaded for other commands

    from live_scribe.l4_frameworks_and_drivers.container import DependencyContainer  # noqa: PLC0415
    from live_scribe.l4_frameworks_and_drivers.server import create_app  # noqa: PLC0415

    config, infra = _load(ctx)
    _configure_logging(config)
    container = DependencyContainer(config, infra)
    _preflight_providers(container)
    app = create_app(container.http_controller)
    uvicorn.run(app, host=host or config.server.host, port=port or config.server.port, log_level='info')


@cli.command()
@click.option('--mock/--real', default=False, help='Use the phrase simulator instead of the microphone.')
@click.option(
    '--speed',
    default=None,
    type=click.Choice([str(s) for s in SIMULATION_SPEEDS_MS]),
    help='Simulator interval in milliseconds.',
)
@click.option('-l', '--language', default=None, help='Recognition locale tag, e.g. en-US.')
@click.option('-d', '--duration', default=None, type=float, help='Stop after this many seconds.')
@click.pass_context
def record(ctx, mock, speed, language, duration):
    """Record one turn and print the transcript as it grows. Ctrl-C stops."""
    from live_scribe.l4_frameworks_and_drivers.container import DependencyContainer  # noqa: PLC0415

    config, infra = _load(ctx)
    _configure_logging(config)
    if not mock:
        _preflight_microphone()
    container = DependencyContainer(config, infra)
    mode = RecordingMode.MOCK if mock else RecordingMode.REAL
    try:
        text = asyncio.run(_record(container, mode, language, int(speed) if speed else None, duration))
    except KeyboardInterrupt:
        click.echo('\nStopped.', err=True)
        return
    if text:
        click.echo('\n--- transcript ---')
        click.echo(text)


@cli.command()
def languages():
    """List recognition locales and summary languages."""
    click.echo('Recognition locales:')
    for code, name in RECOGNITION_LANGUAGES.items():
        click.echo(f'  {code:<6} {name}')
    click.echo('Summary languages:')
    for code, name in APP_LANGUAGES.items():
        click.echo(f'  {code:<6} {name}')


def _preflight_providers(container) -> None:
    for label, service in (
        ('Transcription', container.transcription_service),
        ('Summarization', container.summarization_service),
    ):
        check = getattr(service, 'check_connectivity', None)
        if check is None:
            continue
        ok, err = check()
        if not ok:
            click.echo(f'Warning: {label} provider not reachable ({err}). Requests will fail.', err=True)


def _preflight_microphone() -> None:
    try:
        import sounddevice as sd  # noqa: PLC0415 -- deferred: not loaded on --help

        devices = sd.query_devices()
        input_devices = [d for d in devices if d['max_input_channels'] > 0]
        if not input_devices:
            click.echo('Warning: No input audio devices found.', err=True)
    except Exception as e:
        click.echo(f'Warning: Cannot query audio devices ({e}).', err=True)
