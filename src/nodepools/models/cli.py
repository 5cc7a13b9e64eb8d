"""
Data models for nodepools CLI options using Typer.
"""

from typing import Optional

import typer

OUTPUT_NAME = "name"


class GlobalOptions:
    """Options shared by every subcommand, resolved once in the root callback."""

    def __init__(
        self,
        label: str = "",
        no_headers: bool = False,
        output: Optional[str] = None,
        kubeconfig: Optional[str] = None,
        context: Optional[str] = None,
    ):
        self.label = label
        self.no_headers = no_headers
        self.output = output
        self.kubeconfig = kubeconfig
        self.context = context
        self._validate()

    def _validate(self):
        """Only the 'name' output type is supported."""
        if self.output and self.output != OUTPUT_NAME:
            raise typer.BadParameter(
                f"unrecognized --output type {self.output}, only {OUTPUT_NAME} is valid",
                param_hint="'--output' / '-o'",
            )

    @property
    def only_name(self) -> bool:
        return self.output == OUTPUT_NAME
