"""
Tests for the async command runner used by the CLI.
"""

import asyncio
import os
import signal

import pytest
import typer

from nodepools.cli.utils import run_command
from nodepools.core.exceptions import ClusterConfigError


def test_run_command_returns_result():
    async def _body():
        return ["pool"]

    assert run_command(_body) == ["pool"]


@pytest.mark.parametrize("signum", [signal.SIGTERM, signal.SIGINT])
def test_run_command_cancels_on_signal(signum):
    reached = []

    async def _body():
        os.kill(os.getpid(), signum)
        await asyncio.sleep(5)
        reached.append(True)

    with pytest.raises(typer.Exit) as excinfo:
        run_command(_body)

    assert excinfo.value.exit_code == 128 + signum
    assert reached == []


def test_run_command_reports_cluster_errors(capsys):
    async def _body():
        raise ClusterConfigError("unable to load Kubernetes configuration")

    with pytest.raises(typer.Exit) as excinfo:
        run_command(_body)

    assert excinfo.value.exit_code == 1
    assert "unable to load Kubernetes configuration" in capsys.readouterr().err


def test_run_command_restores_signal_handlers():
    before = signal.getsignal(signal.SIGTERM)

    async def _body():
        return None

    run_command(_body)

    assert signal.getsignal(signal.SIGTERM) == before
