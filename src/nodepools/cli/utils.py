# src/nodepools/cli/utils.py
import asyncio
import logging
import signal
from typing import Awaitable, Callable, List, TypeVar

import typer

from ..collectors.node_collector import NodeCollector
from ..core.exceptions import NodepoolsError
from ..models.cli import GlobalOptions
from ..models.node import NodeRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Interrupted(Exception):
    """Raised when a command was cancelled by SIGINT or SIGTERM."""

    def __init__(self, signum: int):
        super().__init__(signal.Signals(signum).name)
        self.signum = signum


def get_options(ctx: typer.Context) -> GlobalOptions:
    """Returns the options resolved by the root callback."""
    if isinstance(ctx.obj, GlobalOptions):
        return ctx.obj
    return GlobalOptions()


async def fetch_nodes(options: GlobalOptions) -> List[NodeRecord]:
    """Lists the cluster nodes once, closing the API client afterwards."""
    collector = NodeCollector(kubeconfig=options.kubeconfig, context=options.context)
    try:
        nodes = await collector.collect()
        logger.info("Listed %d nodes.", len(nodes))
        return nodes
    finally:
        await collector.close()


async def _cancel_on_signal(func: Callable[[], Awaitable[T]]) -> T:
    loop = asyncio.get_running_loop()
    task = asyncio.current_task()
    received = []

    def _handler(signum: int):
        logger.info("Received %s, cancelling.", signal.Signals(signum).name)
        received.append(signum)
        task.cancel()

    installed = []
    for signum in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(signum, _handler, signum)
            installed.append(signum)
        except (NotImplementedError, RuntimeError, ValueError):
            # Not supported on this platform or outside the main thread.
            logger.debug("Could not install handler for %s", signum)

    try:
        return await func()
    except asyncio.CancelledError:
        if received:
            raise Interrupted(received[0])
        raise
    finally:
        for signum in installed:
            loop.remove_signal_handler(signum)


def run_command(func: Callable[[], Awaitable[T]]) -> T:
    """
    Runs an async command body, translating failures into exit codes.

    SIGINT/SIGTERM cancel the command before anything is printed and exit
    with 128 + signal number. Errors from the cluster exit with code 1.
    """
    try:
        return asyncio.run(_cancel_on_signal(func))
    except Interrupted as e:
        raise typer.Exit(code=128 + e.signum)
    except NodepoolsError as e:
        logger.debug("Command failed", exc_info=True)
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
