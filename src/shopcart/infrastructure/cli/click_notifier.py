"""Notifier that prints user-facing errors to stderr."""

from __future__ import annotations

import click

from shopcart.application.notifier import Notifier


class ClickNotifier(Notifier):

    def report_error(self, message: str) -> None:
        click.secho(message, fg="red", err=True)
