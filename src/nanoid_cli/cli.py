import click

from .generate import run_generate, validate_request
from .generator import DEFAULT_ALPHABET, DEFAULT_LENGTH
from .logger import logger
from .version import get_git_commit_id, get_version, semver_version


@click.group(name="nanoid")
def main():
    """A simple, fast CLI for generating secure, URL-friendly unique string IDs."""


@main.command()
@click.option("--id-length", "-l", default=DEFAULT_LENGTH, show_default=True, help="Length of the Nano ID to generate")
@click.option("--alphabet", "-a", default=DEFAULT_ALPHABET, help="Custom alphabet to use for Nano ID generation")
@click.option("--count", "-c", default=1, show_default=True, help="Number of Nano IDs to generate")
@click.option("--output", "-o", default="", help="Output file to write the generated Nano IDs")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def generate(id_length: int, alphabet: str, count: int, output: str, verbose: bool):
    """Generate one or more Nano IDs.

    If --id-length is not specified, a default length of 21 is used.
    If --alphabet is not specified, the default ASCII alphabet is used.
    If --count is not specified, one Nano ID is generated.
    """
    request = validate_request(id_length, alphabet, count)
    run_generate(request, output=output, verbose=verbose)


@main.command()
def version():
    """Display the version of NanoID CLI."""
    current = get_version()
    try:
        semver_version(current)
    except ValueError as e:
        logger.warning("%s", e)
    click.echo(f"version: {current}")
    click.echo(f"commit: {get_git_commit_id()}")
