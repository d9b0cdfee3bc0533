"""
Command line entry point: ``optimize-public``.
"""

import logging
import os

import click

from .logger_setup import setup_logger
from .models import RootNotFoundError
from .prompts import Prompter
from .settings import OptimizerSettings
from .workflow import run_interactive

log = setup_logger()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.pass_context
def main(ctx: click.Context) -> None:
    """
    Interactive tool to optimize images in your project's public folder.

    Auto-detects images, allows selection by folder or file, and converts
    them to WebP either into a suffixed sibling folder or next to the
    originals.
    """
    exit_code = 0
    try:
        settings = OptimizerSettings.from_env()
        setup_logger(log_file=settings.log_file, level=settings.log_level)
        root = os.path.join(os.getcwd(), settings.root_name)

        click.secho("\nOptimize Public Images CLI\n", bold=True, fg="green")
        run_interactive(root, Prompter(), settings)
    except RootNotFoundError as e:
        log.error(f'Error: "{os.path.basename(e.root)}" folder not found.')
        log.warning("Please run this command from the directory that contains it.")
        exit_code = 1
    except (KeyboardInterrupt, EOFError):
        log.warning("Operation cancelled.")
    except Exception as e:
        log.critical(f"Fatal Error: {e}", exc_info=log.isEnabledFor(logging.DEBUG))
        exit_code = 1
    ctx.exit(exit_code)
