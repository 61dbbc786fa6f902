# ABOUTME: Shared Click options for Shelfdesk CLI commands.
# ABOUTME: Provides reusable decorators for common flags like --verbose.

import click

verbose_option = click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Log catalog and registry changes to stderr.",
)
