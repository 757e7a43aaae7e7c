"""Settings command for The Referee CLI."""

from __future__ import annotations

import sys

from referee.cli.io import console


def _cli():
    return sys.modules["referee.cli"]


def settings_show() -> None:
    """Display the effective configuration payload."""

    console.print_json(data=_cli().get_config_service().summary())
