"""Errors reported by the nanoid command.

Every error is a click exception, so the command dispatcher prints it
to stderr as ``Error: <message>`` and exits with status 1.
"""

import click


class NanoIDError(click.ClickException):
    exit_code = 1


class InvalidArgument(NanoIDError):
    pass


class ConfigurationError(NanoIDError):
    pass


class OutputError(NanoIDError):
    pass


class GenerationError(NanoIDError):
    pass
