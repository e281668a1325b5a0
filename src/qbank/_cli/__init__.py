import click

from .._utils import setup_logging
from .cli_question_banks import create, list_banks, question, questions, rename


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    r"""Manage question banks.

    \b
    Examples:
        qbank list
        qbank create "Math"
        qbank rename 1 "Algebra"
        qbank questions 1
        qbank question 42
    """
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    setup_logging(debug)


cli.add_command(list_banks)
cli.add_command(create)
cli.add_command(rename)
cli.add_command(questions)
cli.add_command(question)
