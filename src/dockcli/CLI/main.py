"""
Command Line Interface for dockcli.
"""
from typing import List, Optional
import click
from ..PARSERS.compose_parser import ComposeParser
from ..MANAGERS.service_orchestrator import ServiceOrchestrator
from ..MANAGERS.service_selection import prompt_candidates, selected_services_to_containers
from ..MODELS.service_definition import ContainerDescriptor
from ..PROMPT.selection_prompt import SelectionPrompt
from ..RUNTIME.docker_actions import DockerRuntimeActions
from ..RUNTIME.runtime_actions import RuntimeContext
from ..UTILS.console_logger import ConsoleLogger
from ..errors import ConfigError, ContainerRuntimeError, SelectionError

DEFAULT_COMPOSE_FILE = 'default-compose.yaml'
COMPOSE_FILE_ENVVAR = 'DOCKCLI_COMPOSE_FILE'

@click.group(context_settings={'help_option_names': ['-h', '--help']})
@click.option('--timeout', type=float, default=None, help='Docker API timeout in seconds')
@click.pass_context
def cli(ctx, timeout):
    """
    dockcli - CLI for docker.

    Starts and stops services of a compose file, each in its own container
    attached to its own network.
    """
    ctx.ensure_object(dict)
    ctx.obj.setdefault('runtime_context', RuntimeContext(timeout=timeout))
    ctx.obj.setdefault('logger', ConsoleLogger())
    ctx.obj.setdefault('prompt', SelectionPrompt())

def _select_containers(ctx, path: str, label: str) -> Optional[List[ContainerDescriptor]]:
    """
    Parses the compose file and asks which of its services to act on.

    :return: The chosen containers, or None after logging a failure.
    """
    logger = ctx.obj['logger']
    try:
        services = ComposeParser().parse(path)
    except ConfigError as e:
        logger.error("Error parsing compose file: %s", e)
        return None

    try:
        selected = ctx.obj['prompt'].select_many(label, prompt_candidates(services))
    except SelectionError as e:
        logger.error("Error selecting services: %s", e)
        return None

    return selected_services_to_containers(selected, services)

def _get_orchestrator(ctx) -> Optional[ServiceOrchestrator]:
    """
    Returns the orchestrator, connecting to the Docker daemon on first use.
    """
    orchestrator = ctx.obj.get('orchestrator')
    if orchestrator is None:
        logger = ctx.obj['logger']
        try:
            actions = DockerRuntimeActions.from_env(ctx.obj['runtime_context'])
        except ContainerRuntimeError as e:
            logger.error("Error creating docker client: %s", e)
            return None
        orchestrator = ServiceOrchestrator(logger, actions)
        ctx.obj['orchestrator'] = orchestrator
    return orchestrator

compose_path_argument = click.argument(
    'path', required=False, default=DEFAULT_COMPOSE_FILE, envvar=COMPOSE_FILE_ENVVAR,
    metavar='[PATH to docker-compose file]',
)

@cli.command()
@compose_path_argument
@click.pass_context
def start(ctx, path):
    """Starts the selected services listed from the specified compose file."""
    containers = _select_containers(ctx, path, "Select services to start")
    if not containers:
        return
    orchestrator = _get_orchestrator(ctx)
    if orchestrator is None:
        return

    run_ctx = ctx.obj['runtime_context']
    for container in containers:
        try:
            orchestrator.service_provisioning(run_ctx, container)
        except ContainerRuntimeError as e:
            ctx.obj['logger'].error("Error starting services: %s", e)
            return

@cli.command()
@compose_path_argument
@click.pass_context
def stop(ctx, path):
    """Stops the selected services listed from the specified compose file."""
    containers = _select_containers(ctx, path, "Select services to stop")
    if not containers:
        return
    orchestrator = _get_orchestrator(ctx)
    if orchestrator is None:
        return

    run_ctx = ctx.obj['runtime_context']
    for container in containers:
        try:
            orchestrator.service_decommissioning(run_ctx, container)
        except ContainerRuntimeError as e:
            ctx.obj['logger'].error("Error stopping services: %s", e)
            return

def main():
    """
    Main entry point for the CLI.
    """
    cli(obj={})

if __name__ == '__main__':
    main()
