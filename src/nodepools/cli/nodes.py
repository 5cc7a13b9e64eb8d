# src/nodepools/cli/nodes.py
"""
Implements the `nodes` command: the nodes of one pool and their status.
"""

import logging
from typing import List, Optional

import typer
from typing_extensions import Annotated

from ..core.pool_filter import filter_by_pool
from ..reporters.console_reporter import ConsoleReporter
from .utils import fetch_nodes, get_options, run_command

logger = logging.getLogger(__name__)


def nodes(
    ctx: typer.Context,
    names: Annotated[
        Optional[List[str]],
        typer.Argument(metavar="NAME", help="Name of the node pool/group, as shown by `list`.", show_default=False),
    ] = None,
):
    """
    List nodes in the given node pool/group, alongside their status.
    """
    if not names or len(names) != 1:
        raise typer.BadParameter("need to pass a single nodepool name", param_hint="NAME")

    options = get_options(ctx)
    pool_name = names[0]

    async def _nodes_async():
        cluster_nodes = await fetch_nodes(options)
        return filter_by_pool(cluster_nodes, options.label, pool_name)

    matched = run_command(_nodes_async)
    if not matched:
        logger.warning("No nodes found in pool '%s'.", pool_name)

    reporter = ConsoleReporter(no_headers=options.no_headers, only_name=options.only_name)
    reporter.report_nodes(matched)
