# src/nodepools/cli/main.py
"""
This module is the main entry point for the nodepools CLI.

It resolves the options shared by every command and registers the
`list` and `nodes` commands (with their `ls` and `ns` aliases).
"""

import logging
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.config import config
from ..models.cli import GlobalOptions
from . import list_pools, nodes

# --- Setup Logger ---
logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = typer.Typer(
    name="nodepools",
    help=(
        "Read-only interaction with nodepools.\n\n"
        "List node pools/groups in the current cluster, alongside a count of "
        "how many nodes there are in each pool/group and their type.\n\n"
        "You can also list nodes for a given node pool/group by name."
    ),
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool):
    """
    Prints the version of nodepools.
    """
    if value:
        from .. import __version__

        typer.echo(f"nodepools version: {__version__}")
        raise typer.Exit()


@app.command()
def version():
    """
    Show the version of nodepools.
    """
    from .. import __version__

    typer.echo(f"nodepools version: {__version__}")


@app.callback()
def main(
    ctx: typer.Context,
    label: Annotated[
        Optional[str],
        typer.Option("--label", "-l", help="Label to group nodes into pools with.", show_default=False),
    ] = None,
    no_headers: Annotated[
        bool,
        typer.Option("--no-headers", help="Don't print headers (default print headers)."),
    ] = False,
    output: Annotated[
        Optional[str],
        typer.Option("--output", "-o", help="Output format. Only name.", show_default=False),
    ] = None,
    kubeconfig: Annotated[
        Optional[str],
        typer.Option("--kubeconfig", help="Path to the kubeconfig file to use.", show_default=False),
    ] = None,
    context: Annotated[
        Optional[str],
        typer.Option("--context", help="The name of the kubeconfig context to use.", show_default=False),
    ] = None,
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """
    Read-only interaction with nodepools.
    """
    ctx.obj = GlobalOptions(
        label=config.resolve_label(label),
        no_headers=no_headers,
        output=output,
        kubeconfig=kubeconfig,
        context=context or config.KUBE_CONTEXT,
    )
    logger.debug("Grouping nodes with custom label %r", ctx.obj.label)


# Register commands and their short aliases
app.command("list")(list_pools.list_pools)
app.command("ls", hidden=True)(list_pools.list_pools)
app.command("nodes")(nodes.nodes)
app.command("ns", hidden=True)(nodes.nodes)


if __name__ == "__main__":
    app()
