"""
XLS20 CLI

Command-line interface for XLS-20 NFTs on the XRP Ledger.

Identity = one XRPL wallet seed, stored in ~/.xls20/.env as XRPL_SEED.
The network defaults to Devnet; override with --network or XRPL_NETWORK.

Commands:
  wallet   - Create and store a wallet seed
  whoami   - Show current wallet address
  info     - Show configuration and available commands
  account  - Account info, faucet funding, NFT listing
  mint     - Mint an NFT
  offer    - Create, accept, broker and cancel offers
  burn     - Burn an NFT
"""

from __future__ import annotations

import logging
import sys

import click

from .identity.wallet import XLS20_ENV, get_address, load_config, load_seed
from .ledger.networks import get_network, resolve_endpoint


# ============ Constants ============

VERSION = "1.0.0"


# ============ Banner ============


def _print_banner() -> None:
    border = click.style("  ◆ ═══════════════════════════════════════ ◆", fg="cyan")
    click.echo()
    click.echo(border)
    click.echo()
    click.echo(
        click.style("        X L S 2 0", fg="bright_white", bold=True)
        + click.style(f"        v{VERSION}", dim=True)
    )
    click.secho("        ─── NFTs on the XRP Ledger ───", fg="cyan")
    click.echo()
    click.echo(border)
    click.echo()


def _configure_logging(verbose: bool) -> None:
    root = logging.getLogger()
    if not verbose or root.handlers:
        return
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=VERSION, prog_name="xls20")
@click.option("--verbose", "-v", is_flag=True, help="Log ledger requests to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """XLS20: NFTs on the XRP Ledger."""
    _configure_logging(verbose)
    # Subcommand options read XRPL_NETWORK and XRPL_FAUCET_HOST after this
    load_config()
    if ctx.invoked_subcommand is None:
        _print_banner()
        click.echo(ctx.get_help())


# ============ Top-level Commands ============

from .commands.wallet import wallet
from .commands.account import account
from .commands.mint import mint
from .commands.offer import offer
from .commands.burn import burn

cli.add_command(wallet)
cli.add_command(account)
cli.add_command(mint)
cli.add_command(offer)
cli.add_command(burn)


# ============ Identity ============


@cli.command()
def whoami() -> None:
    """Show current wallet identity."""
    try:
        address = get_address(load_seed())
        click.echo(f"Address: {address}")
    except (ValueError, FileNotFoundError):
        click.echo("No wallet found.")
        click.echo("Run 'xls20 wallet new' to create one.")
        sys.exit(1)


# ============ Info ============


@cli.command()
def info() -> None:
    """Show configuration and available commands."""
    _print_banner()

    click.secho("  Status ─────────────────────────────────", fg="cyan")
    click.echo()

    try:
        address = get_address(load_seed())
        click.echo(
            click.style("  Address:  ", dim=True)
            + click.style(address, fg="bright_white")
        )
    except (ValueError, FileNotFoundError):
        click.echo(
            click.style("  Address:  ", dim=True)
            + click.style("not initialized", fg="yellow")
            + click.style("  (run: xls20 wallet new)", dim=True)
        )

    endpoint = resolve_endpoint(get_network())
    click.echo(
        click.style("  Network:  ", dim=True)
        + click.style(f"{endpoint.name} ({endpoint.url})", fg="bright_white")
    )
    click.echo(click.style("  Config:   ", dim=True) + str(XLS20_ENV))
    click.echo()

    click.secho("  Commands ───────────────────────────────", fg="cyan")
    click.echo()

    commands = [
        ("wallet  ", "Create and store a wallet seed"),
        ("account ", "Account info, funding, NFT listing"),
        ("mint    ", "Mint an NFT"),
        ("offer   ", "Sell, buy, accept, broker, cancel"),
        ("burn    ", "Burn an NFT"),
        ("whoami  ", "Show current wallet address"),
    ]
    for cmd, desc in commands:
        click.echo(
            click.style("  ", dim=True)
            + click.style(cmd, fg="bright_white", bold=True)
            + click.style("  ◇  ", fg="cyan")
            + click.style(desc, dim=True)
        )

    click.echo()


# ============ Entry Points ============


def main() -> None:
    """XLS20 CLI entry point."""
    # Ensure UTF-8 output on Windows (for Unicode box-drawing / symbols)
    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, OSError):
            pass  # Fallback: old Python or non-tty
    cli()


if __name__ == "__main__":
    main()
