import asyncio
import json
from functools import wraps
from logging import getLogger
from typing import Any, Awaitable, Callable, List, Optional, Union

import click
from pydantic import BaseModel

from .._question_bank_client import QuestionBankClient
from .._utils.constants import LOGGER_NAME
from ..models import QBankError, QuestionBank

logger = getLogger(LOGGER_NAME)


def _dump(data: Union[BaseModel, List[BaseModel], None]) -> str:
    if data is None:
        return "null"
    if isinstance(data, list):
        return json.dumps([item.model_dump(mode="json") for item in data], indent=2)
    return json.dumps(data.model_dump(mode="json"), indent=2)


def client_command(
    func: Callable[..., Awaitable[Any]],
) -> Callable[..., None]:
    """Run an async command body against a fresh client and print its result.

    On failure the error is logged and the command aborts without printing
    anything to stdout.
    """

    @click.pass_context
    @wraps(func)
    def wrapper(ctx: click.Context, *args: Any, **kwargs: Any) -> None:
        async def run() -> Any:
            async with QuestionBankClient(debug=ctx.obj.get("debug", False)) as client:
                return await func(client, *args, **kwargs)

        try:
            data = asyncio.run(run())
        except QBankError as e:
            logger.error(f"{ctx.command.name} failed: {e}")
            raise click.Abort() from e

        click.echo(_dump(data))

    return wrapper


@click.command(name="list")
@client_command
async def list_banks(client: QuestionBankClient) -> Any:
    """List question banks."""
    result = await client.question_banks.list_async()
    return result.data


@click.command()
@click.argument("name")
@client_command
async def create(client: QuestionBankClient, name: str) -> Any:
    """Create a question bank called NAME."""
    result = await client.question_banks.create_async(QuestionBank(name=name))
    return result.data


@click.command()
@click.argument("bank_id", type=int)
@click.argument("name")
@client_command
async def rename(client: QuestionBankClient, bank_id: int, name: str) -> Any:
    """Rename question bank BANK_ID to NAME."""
    result = await client.question_banks.update_async(
        bank_id, QuestionBank(id=bank_id, name=name)
    )
    return result.data


@click.command()
@click.argument("bank_id", type=int)
@click.option("--page", type=click.IntRange(min=1), help="Page number")
@click.option("--page-size", type=click.IntRange(min=1), help="Questions per page")
@click.option("--tag", help="Only list questions with this tag")
@client_command
async def questions(
    client: QuestionBankClient,
    bank_id: int,
    page: Optional[int],
    page_size: Optional[int],
    tag: Optional[str],
) -> Any:
    """List the questions of question bank BANK_ID."""
    result = await client.question_banks.questions_async(
        bank_id, page=page, page_size=page_size, tag=tag
    )
    return result.data


@click.command()
@click.argument("question_id", type=int)
@client_command
async def question(client: QuestionBankClient, question_id: int) -> Any:
    """Show question QUESTION_ID with its answer options."""
    result = await client.questions.retrieve_async(question_id)
    return result.data
