"""
This module contains the generate command: validate the request, build one
generator, and write the requested number of IDs to the chosen sink.
"""

import time
from datetime import datetime
from typing import Optional, TextIO

import click
from pydantic import BaseModel, ConfigDict

from .errors import ConfigurationError, GenerationError, InvalidArgument, OutputError
from .generator import DEFAULT_ALPHABET, Generator, new_generator
from .logger import logger

STDOUT = "-"


class GenerateRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    length: int
    alphabet: str
    count: int


class GenerateStats(BaseModel):
    start: datetime
    count: int
    length: int
    duration: float  # seconds
    entropy_bits: float

    @property
    def average(self) -> float:
        return self.duration / self.count

    @property
    def throughput(self) -> float:
        if self.duration <= 0:
            return float("inf")
        return self.count / self.duration

    @property
    def estimated_bytes(self) -> int:
        # Every ID is followed by a newline
        return self.count * (self.length + 1)


def validate_request(length: int, alphabet: str, count: int) -> GenerateRequest:
    if length <= 0:
        raise InvalidArgument("--id-length must be a positive integer")
    if count <= 0:
        raise InvalidArgument("--count must be a positive integer")
    return GenerateRequest(length=length, alphabet=alphabet, count=count)


def human_bytes(n: int) -> str:
    unit = 1024
    if n < unit:
        return f"{n} B"
    div, exp = unit, 0
    while n // div >= unit and exp < 5:
        div *= unit
        exp += 1
    return f"{n / div:.1f} {'KMGTPE'[exp]}B"


def build_generator(request: GenerateRequest, verbose: bool = False) -> Generator:
    options = {"length_hint": request.length}
    if request.alphabet != DEFAULT_ALPHABET:
        options["alphabet"] = request.alphabet
        if verbose:
            click.echo("Custom alphabet provided. Initializing custom generator.", err=True)
    try:
        return new_generator(**options)
    except ConfigurationError as e:
        raise ConfigurationError(f"failed to initialize Nano ID generator: {e.message}") from e


def open_output(output: Optional[str], verbose: bool = False) -> TextIO:
    path = output or STDOUT
    try:
        sink = click.open_file(path, "w", encoding="utf-8")
    except OSError as e:
        raise OutputError(f"failed to create output file: {e}") from e
    if verbose:
        if path == STDOUT:
            click.echo("Output will be printed to stdout.", err=True)
        else:
            click.echo(f"Output will be written to file: {path}", err=True)
    return sink


def write_ids(generator: Generator, request: GenerateRequest, sink: TextIO, verbose: bool = False) -> None:
    for i in range(1, request.count + 1):
        try:
            nano_id = generator.new(request.length)
        except GenerationError as e:
            raise GenerationError(f"error generating Nano ID: {e.message}") from e
        try:
            sink.write(nano_id + "\n")
        except OSError as e:
            raise OutputError(f"error writing Nano ID: {e}") from e
        if verbose:
            click.echo(f"Generated ID {i}: {nano_id}")


def print_stats(stats: GenerateStats) -> None:
    lines = [
        "",
        f"Start Time..............: {stats.start.isoformat(timespec='seconds')}",
        f"Total IDs generated.....: {stats.count}",
        f"Total time taken........: {stats.duration:.6f}s",
        f"Average time per ID.....: {stats.average:.9f}s",
        f"Throughput..............: {stats.throughput:.2f} IDs/sec",
        f"Estimated output size...: {human_bytes(stats.estimated_bytes)}",
        f"Estimated entropy per ID: {stats.entropy_bits:.2f} bits",
    ]
    for line in lines:
        click.echo(line, err=True)


def run_generate(request: GenerateRequest, output: Optional[str] = None, verbose: bool = False) -> GenerateStats:
    """
    Generate `request.count` IDs and write them one per line.

    Args:
        request: Validated generation request
        output: File to create or overwrite; stdout when empty
        verbose: Print a progress line per ID and a summary at the end

    Returns:
        Timing and size statistics of the run
    """
    generator = build_generator(request, verbose)
    sink = open_output(output, verbose)

    start = datetime.now().astimezone()
    started = time.perf_counter()
    # Buffered output may only fail once flushed or closed
    try:
        with sink:
            write_ids(generator, request, sink, verbose)
            sink.flush()
    except OSError as e:
        raise OutputError(f"error writing Nano ID: {e}") from e
    duration = time.perf_counter() - started
    logger.debug("Generated %d IDs in %.6fs", request.count, duration)

    stats = GenerateStats(
        start=start,
        count=request.count,
        length=request.length,
        duration=duration,
        entropy_bits=generator.entropy_bits(request.length),
    )
    if verbose:
        print_stats(stats)
    return stats
