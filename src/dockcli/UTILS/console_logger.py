"""
Colorized console logging for the CLI.
"""
from typing import Any, Optional, Protocol
import click


class Logger(Protocol):
    """
    Three severity channels, each taking a ``%``-style template and its params.
    """
    def info(self, template: str, *params: Any) -> None: ...

    def warn(self, template: str, *params: Any) -> None: ...

    def error(self, template: str, *params: Any) -> None: ...


def _render(template: str, params: tuple) -> str:
    return template % params if params else template


class ConsoleLogger:
    """
    Writes info in green, warnings in yellow and errors in red (to stderr).
    String parameters of info messages are highlighted in blue.
    """
    def __init__(self, color: Optional[bool] = None):
        """
        :param color: Force colors on or off. None lets click decide from the terminal.
        """
        self.color = color

    def info(self, template: str, *params: Any) -> None:
        highlighted = tuple(click.style(p, fg='blue') if isinstance(p, str) else p for p in params)
        click.echo(click.style(_render(template, highlighted), fg='green'), color=self.color)

    def warn(self, template: str, *params: Any) -> None:
        click.echo(click.style(_render(template, params), fg='yellow'), color=self.color)

    def error(self, template: str, *params: Any) -> None:
        click.echo(click.style(_render(template, params), fg='red'), err=True, color=self.color)
