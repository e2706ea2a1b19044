"""Entry point for the pyofluent demonstration CLI."""

import logging
import timeit
from collections.abc import Iterable
from enum import StrEnum
from functools import partial
from typing import Annotated, Final

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

import pyofluent as pf

SAMPLE: Final = (1, -61, 14, -22, 18, -87, 6, 64, -82, 26, -98, 97, 45, 23, 2, -68, 45)

CONSOLE: Final = Console()

logger = logging.getLogger("pyofluent.demo")

app = typer.Typer(help="Demonstrations of eager and lazy pyofluent pipelines.")


class Strategy(StrEnum):
    """Evaluation strategy of a pipeline."""

    EAGER = "eager"
    LAZY = "lazy"

    def pipeline[T](self, data: Iterable[T]) -> pf.Pipeline[T]:
        """Create a pipeline over **data** with this strategy."""
        match self:
            case Strategy.EAGER:
                return pf.EagerPipeline.from_(data)
            case Strategy.LAZY:
                return pf.LazyPipeline.from_(data)


def _negative(x: int) -> bool:
    return x < 0


def _positive(x: int) -> bool:
    return x > 0


def _to_string(x: int) -> str:
    return f"String[{x}]"


def _pretty(prefix: str, items: Iterable[object]) -> str:
    return prefix + ", ".join(map(str, items)) + "."


def summaries(strategy: Strategy) -> list[str]:
    """Run the sample queries over `SAMPLE` and describe their results, one line each."""
    lines = [
        _pretty("The initial list contains: ", SAMPLE),
        _pretty(
            "The first three negative values are: ",
            strategy.pipeline(SAMPLE).filter(_negative).take(3),
        ),
        _pretty(
            "The last two positive values are: ",
            strategy.pipeline(SAMPLE).filter(_positive).tail(2),
        ),
    ]
    (
        strategy.pipeline(SAMPLE)
        .filter(lambda x: x % 2 == 0)
        .first()
        .inspect(lambda x: lines.append(f"The first even number is: {x}"))
    )
    lines.append(
        _pretty(
            "A string-mapped list of negative numbers contains: ",
            strategy.pipeline(SAMPLE).filter(_negative).map(_to_string),
        )
    )
    lines.append(
        _pretty(
            "The lazy list contains the last two of the first four positive numbers "
            "mapped to Strings: ",
            strategy.pipeline(SAMPLE).filter(_positive).take(4).tail(2).map(_to_string),
        )
    )
    (
        strategy.pipeline(SAMPLE)
        .filter(_negative)
        .take(2)
        .last()
        .inspect(lambda x: lines.append(f"The last of the first two negatives is: {x}"))
    )
    return lines


def _squares_of_evens(strategy: Strategy, data: tuple[int, ...], n: int) -> list[int]:
    return (
        strategy.pipeline(data)
        .filter(lambda x: x % 2 == 0)
        .map(lambda x: x * x)
        .take(n)
        .to_list()
    )


@app.callback()
def main(
    *,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logs.")
    ] = False,
) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=CONSOLE, show_path=False)],
        force=True,
    )


@app.command()
def demo(
    strategy: Annotated[
        Strategy, typer.Option(help="Evaluation strategy of the pipelines.")
    ] = Strategy.LAZY,
) -> None:
    """Filter, map and slice a sample list of integers, and log the results."""
    logger.info("Using the %s strategy", strategy)
    for line in summaries(strategy):
        logger.info(line)


@app.command()
def compare(
    *,
    size: Annotated[int, typer.Option(min=1, help="Number of source elements.")] = 100_000,
    take: Annotated[int, typer.Option(min=0, help="Number of elements kept.")] = 10,
    number: Annotated[int, typer.Option(min=1, help="Calls timed by strategy.")] = 10,
) -> None:
    """Time the same chain with both strategies."""
    data = tuple(range(size))
    results = {
        strategy: _squares_of_evens(strategy, data, take) for strategy in Strategy
    }
    if results[Strategy.EAGER] != results[Strategy.LAZY]:
        CONSOLE.print("✗ Strategies returned different results", style="bold red")
        raise typer.Exit(code=1)

    table = Table(title=f"filter -> map -> take({take}) over {size} elements")
    table.add_column("strategy")
    table.add_column("mean (ms)", justify="right")
    for strategy in Strategy:
        fn = partial(_squares_of_evens, strategy, data, take)
        seconds = timeit.timeit(fn, number=number) / number
        table.add_row(strategy.value, f"{seconds * 1000:.3f}")
    CONSOLE.print(table)


if __name__ == "__main__":
    app()
