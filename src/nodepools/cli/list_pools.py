# src/nodepools/cli/list_pools.py
"""
Implements the `list` command: node pools with node counts and instance types.
"""

import logging

import typer
from typing_extensions import Annotated

from ..core.aggregator import aggregate_nodepools
from ..reporters.console_reporter import ConsoleReporter
from .utils import fetch_nodes, get_options, run_command

logger = logging.getLogger(__name__)


def list_pools(
    ctx: typer.Context,
    counts: Annotated[
        bool,
        typer.Option("--counts", help="Show how many nodes of each instance type a pool has."),
    ] = False,
):
    """
    List node pools/groups in the current cluster, alongside a count of nodes and their type.
    """
    options = get_options(ctx)

    async def _list_async():
        nodes = await fetch_nodes(options)
        return aggregate_nodepools(nodes, options.label)

    pools = run_command(_list_async)
    logger.info("Found %d node pools.", len(pools))

    reporter = ConsoleReporter(no_headers=options.no_headers, only_name=options.only_name, show_counts=counts)
    reporter.report_pools(pools)
