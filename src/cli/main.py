"""Main CLI entry point for the webscript-sync command.

This module provides the Typer application that drives exactly one web
script call per invocation: one change-feed page, one node, one node's
metadata, user authorities, or one content download.
"""

import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import typer

from src.webscript_client.auth import Authenticator
from src.webscript_client.client import WebScriptClient
from src.webscript_client.errors import MalformedResponseError, RepositoryUnavailableError

from .config import ConfigLoader, StateManager
from .errors import CLIError
from .models import ConnectionConfig, ExitCode
from .output import OutputHandler

app = typer.Typer(
    name="webscript-sync",
    help="""Incremental sync client for repository indexing web scripts.

QUICK START:
  webscript-sync changes                   # Fetch the next page of changes
  webscript-sync changes --dry-run         # Fetch without saving the cursor
  webscript-sync node <uuid>               # Current action of one node
  webscript-sync metadata <uuid>           # Flattened node properties
  webscript-sync authorities [username]    # User group/role memberships
  webscript-sync content <url> -o <file>   # Download raw content

Connection settings are read from .webscript-sync/config.yaml and
credentials from WEBSCRIPT_USERNAME / WEBSCRIPT_PASSWORD (or .env).""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)


@dataclass
class CLIContext:
    """Global options shared by every command."""
    config_path: str
    verbosity: int = 0
    no_color: bool = False


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)
    app_logger.handlers.clear()

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"webscript-sync_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _create_client(config: ConnectionConfig) -> WebScriptClient:
    """Build a client from connection settings and environment credentials."""
    credentials = Authenticator().get_credentials()
    return WebScriptClient.from_settings(
        protocol=config.protocol,
        hostname=config.hostname,
        endpoint=config.endpoint,
        store_protocol=config.store_protocol,
        store_id=config.store_id,
        credentials=credentials,
        timeout=config.timeout,
    )


def _run(
    cli_ctx: CLIContext,
    action: Callable[[WebScriptClient, ConnectionConfig, OutputHandler], None],
) -> None:
    """Load config, open a client, run one action and map failures to exit codes."""
    output = OutputHandler(verbosity=cli_ctx.verbosity, no_color=cli_ctx.no_color)

    try:
        config = ConfigLoader.load(cli_ctx.config_path)
        output.debug(f"Repository: {config.protocol}://{config.hostname}{config.endpoint}")
        with _create_client(config) as client:
            action(client, config, output)

    except RepositoryUnavailableError as e:
        logger.error(f"Repository unavailable: {e}")
        output.error(str(e))
        raise typer.Exit(ExitCode.NETWORK_ERROR)

    except MalformedResponseError as e:
        logger.error(f"Malformed response: {e}")
        output.error(f"Malformed response: {e}")
        raise typer.Exit(ExitCode.MALFORMED_RESPONSE)

    except CLIError as e:
        logger.error(str(e))
        output.error(str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    except typer.Exit:
        raise

    except Exception as e:
        logger.exception("Unexpected error")
        output.error(f"Unexpected error: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: str = typer.Option(
        ConfigLoader.default_path(),
        "--config",
        "-c",
        help="Path to the connection config YAML file",
        metavar="PATH",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """Incremental sync client for repository indexing web scripts."""
    _configure_logging(verbosity, logdir)
    ctx.obj = CLIContext(config_path=config, verbosity=verbosity, no_color=no_color)


@app.command()
def changes(
    ctx: typer.Context,
    state: str = typer.Option(
        StateManager.default_path(),
        "--state",
        help="Path to the cursor state YAML file",
        metavar="PATH",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Fetch and display changes without saving the new cursor",
    ),
) -> None:
    """Fetch the next page of changes after the saved cursor."""
    def _action(client: WebScriptClient, config: ConnectionConfig, output: OutputHandler) -> None:
        cursor = StateManager.load(state)
        output.info(
            f"Resuming from last_txn_id={cursor.last_transaction_id} "
            f"last_acl_changeset_id={cursor.last_acl_changeset_id}"
        )
        with output.spinner("Fetching changes..."):
            batch = client.fetch_changes(cursor, config.filters)
        output.print_batch(batch)

        next_cursor = cursor.advance(batch)
        if dry_run:
            output.info("Dry run: cursor not saved")
            return
        StateManager.save(state, next_cursor)
        output.success(f"Fetched {len(batch)} change(s), cursor saved to {state}")

    _run(ctx.obj, _action)


@app.command()
def node(
    ctx: typer.Context,
    node_id: str = typer.Argument(..., help="Node uuid"),
) -> None:
    """Show the current action of one node."""
    def _action(client: WebScriptClient, config: ConnectionConfig, output: OutputHandler) -> None:
        with output.spinner(f"Fetching node {node_id}..."):
            batch = client.fetch_node(node_id)
        output.print_batch(batch)

    _run(ctx.obj, _action)


@app.command()
def metadata(
    ctx: typer.Context,
    node_id: str = typer.Argument(..., help="Node uuid"),
) -> None:
    """Show the flattened metadata of one node."""
    def _action(client: WebScriptClient, config: ConnectionConfig, output: OutputHandler) -> None:
        with output.spinner(f"Fetching metadata of {node_id}..."):
            record = client.fetch_metadata(node_id)
        output.print_metadata(record)

    _run(ctx.obj, _action)


@app.command()
def authorities(
    ctx: typer.Context,
    username: Optional[str] = typer.Argument(None, help="User to resolve; all users when omitted"),
) -> None:
    """Show the group and role memberships of one or all users."""
    def _action(client: WebScriptClient, config: ConnectionConfig, output: OutputHandler) -> None:
        with output.spinner("Resolving authorities..."):
            if username is None:
                users = client.fetch_all_user_authorities()
            else:
                users = [client.fetch_user_authorities(username)]
        output.print_authorities(users)

    _run(ctx.obj, _action)


@app.command()
def content(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Absolute content URL"),
    output_path: str = typer.Option(
        ...,
        "--output",
        "-o",
        help="File to write the content to",
        metavar="PATH",
    ),
) -> None:
    """Download the raw content of a node."""
    def _action(client: WebScriptClient, config: ConnectionConfig, output: OutputHandler) -> None:
        with output.spinner("Downloading content..."):
            written = client.content.download(url, output_path)
        output.success(f"Wrote {written} bytes to {output_path}")

    _run(ctx.obj, _action)


def main() -> None:
    """Main entry point for the CLI application."""
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()
