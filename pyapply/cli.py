"""
Command line entry point

    python -m pyapply laws        check the laws for every variant
    python -m pyapply exercises   print the worked exercise results
"""
import argparse
from collections.abc import Callable, Sequence
import logging
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .array import Array
from .compose import compose_pure
from .either import Left, Right
from .exercises import ex1, ex2, ex3, ex4
from .identity import Identity
from .io import IO
from .laws import LawResult, Sample, check_applicative, check_monad, \
    validate_laws
from .log import configure_logging
from .maybe import Just, Nothing
from .settings import get_settings
from .task import Task
from .tuple import Tuple
from .validation import V

logger = logging.getLogger(__name__)

def _inc(x: int) -> int:
    return x + 1

def _double(x: int) -> int:
    return x * 2

def _sample(pure: Callable[[Any], Any]) -> Sample:
    return Sample(x=3, f=_inc, g=_double,
                  u=pure(_inc), v=pure(_double), w=pure(3))

def _applicative_and_monad(pure: Callable[[Any], Any],
                           observe: Callable[[Any], Any] = lambda c: c) \
    -> Array[LawResult]:
    return check_applicative(pure, _sample(pure), observe) \
        + check_monad(pure, pure(3),
                      lambda x: pure(_inc(x)), lambda x: pure(_double(x)),
                      3, observe)

def _run_io(c: IO) -> Any:
    return c.run()

def _run_task(c: Task) -> Any:
    return c.attempt().run_sync()

def law_suites() -> list[tuple[str, Array[LawResult]]]:
    """
    Law results for each variant shipped with pyapply
    """
    task_maybe = compose_pure(Task.pure, Just.pure)
    return [
        ("Identity", _applicative_and_monad(Identity.pure)),
        ("Maybe", _applicative_and_monad(Just.pure)),
        ("Either", _applicative_and_monad(Right.pure)),
        ("IO", _applicative_and_monad(IO.pure, _run_io)),
        ("Task", _applicative_and_monad(Task.pure, _run_task)),
        ("Array", _applicative_and_monad(Array.pure)),
        ("Tuple", _applicative_and_monad(Tuple.pure)),
        ("Validation", check_applicative(V.pure, _sample(V.pure))),
        ("Compose[Task, Maybe]",
         check_applicative(task_maybe, _sample(task_maybe),
                           lambda c: _run_task(c.decompose()))),
    ]

def laws_table(suites: Sequence[tuple[str, Array[LawResult]]]) -> Table:
    """
    One row per variant and law
    """
    table = Table(title="Law checks", row_styles=['', 'on grey85'])
    table.add_column("Variant")
    table.add_column("Law")
    table.add_column("Result")
    for variant, results in suites:
        for result in results:
            table.add_row(escape(variant), result.law.value,
                          "[green]holds[/green]" if result.holds
                          else f"[red]{escape(repr(result.lhs))} != "
                          f"{escape(repr(result.rhs))}[/red]")
    return table

def run_laws(console: Console) -> int:
    """
    Print the law table; exit status 1 if any law is broken
    """
    suites = law_suites()
    console.print(laws_table(suites))
    broken = Array.mempty()
    for variant, results in suites:
        match validate_laws(variant, results).validity:
            case Left(errors):
                broken = broken + errors
    for message in broken:
        console.print(f"[red]{escape(message)}[/red]")
    return 1 if broken.length else 0

def run_exercises(console: Console) -> int:
    """
    Print the result of each worked exercise
    """
    console.print(f"ex1(Just(2), Just(3)) = {ex1(Just(2), Just(3))!r}")
    console.print(f"ex1(Just(2), Nothing) = {ex1(Just(2), Nothing)!r}")
    console.print(f"ex2(Just(2), Just(3)) = {ex2(Just(2), Just(3))!r}")
    console.print(f"ex3() = {ex3().run_sync()}", markup=False)
    console.print(f"ex4() = {ex4().run()}")
    return 0

def create_parser() -> argparse.ArgumentParser:
    """
    Parser with one subcommand per entry point
    """
    parser = argparse.ArgumentParser(
        prog="pyapply",
        description="Check the applicative laws and run the worked exercises")
    subparsers = parser.add_subparsers(title="commands", dest="command")
    subparsers.add_parser(
        "laws", help="check the laws for every variant (default)"
    ).set_defaults(run=run_laws)
    subparsers.add_parser(
        "exercises", help="print the worked exercise results"
    ).set_defaults(run=run_exercises)
    parser.set_defaults(run=run_laws)
    return parser

def main(argv: Sequence[str] | None = None) -> int:
    """
    Dispatch to the requested command, "laws" by default
    """
    args = create_parser().parse_args(argv)
    configure_logging(get_settings().log_level)
    logger.debug("Running %s", args.command or "laws")
    return args.run(Console())
