# src/nodepools/reporters/console_reporter.py
"""
A reporter that displays pools and nodes as kubectl-style columns in the console.
"""

import logging
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from ..models.node import NodeStatus, PoolSummary
from .base_reporter import BaseReporter

logger = logging.getLogger(__name__)


class ConsoleReporter(BaseReporter):
    """
    Renders pool reports to the console using the 'rich' library.

    The header and name-only toggles only affect rendering.
    """

    def __init__(
        self,
        no_headers: bool = False,
        only_name: bool = False,
        show_counts: bool = False,
        console: Optional[Console] = None,
    ):
        self.no_headers = no_headers
        self.only_name = only_name
        self.show_counts = show_counts
        self.console = console or Console(highlight=False, soft_wrap=True)

    def _new_table(self) -> Table:
        return Table(
            box=None,
            show_header=not self.no_headers,
            header_style="bold",
            pad_edge=False,
            padding=(0, 3, 0, 0),
        )

    def report_pools(self, pools: List[PoolSummary]):
        table = self._new_table()
        table.add_column("NAME", no_wrap=True)
        if not self.only_name:
            table.add_column("NODES", justify="right")
            table.add_column("TYPE")

        for pool in pools:
            if self.only_name:
                table.add_row(pool.name)
            else:
                table.add_row(pool.name, str(pool.node_count), pool.type_list(with_counts=self.show_counts))

        logger.debug("Rendering %d pools", len(pools))
        self.console.print(table)

    def report_nodes(self, nodes: List[NodeStatus]):
        table = self._new_table()
        table.add_column("NODE", no_wrap=True)
        if not self.only_name:
            table.add_column("STATUS")

        for node in nodes:
            if self.only_name:
                table.add_row(node.name)
            else:
                table.add_row(node.name, node.status)

        logger.debug("Rendering %d nodes", len(nodes))
        self.console.print(table)
