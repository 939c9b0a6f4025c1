"""
Wallet - Create and store the signing seed.

The seed is written to ~/.xls20/.env as XRPL_SEED.  An existing seed is
kept unless --force is given.
"""

from __future__ import annotations

import click

from ..identity.wallet import generate_seed, get_address, load_seed, save_seed


@click.group()
def wallet() -> None:
    """Manage the signing wallet."""
    pass


@wallet.command("new")
@click.option("--force", is_flag=True, help="Replace an existing seed")
def wallet_new(force: bool) -> None:
    """Generate a wallet and save its seed."""
    if not force:
        try:
            existing = get_address(load_seed())
            click.echo(f"Wallet already exists: {existing}")
            click.echo("Use --force to replace it.")
            return
        except (ValueError, FileNotFoundError):
            pass

    seed, address = generate_seed()
    env_path = save_seed(seed)

    click.echo(click.style("  Address: ", dim=True) + click.style(address, fg="bright_white"))
    click.echo(click.style("  Config:  ", dim=True) + click.style(str(env_path), fg="bright_white"))
    click.echo()
    click.secho("  IMPORTANT: Back up ~/.xls20/.env. A lost seed cannot be recovered.", fg="yellow", bold=True)
    click.echo()
    click.secho("  Next steps:", fg="cyan")
    click.echo("    1. Run 'xls20 account fund' to get test XRP")
    click.echo("    2. Run 'xls20 mint --uri <URI>' to mint an NFT")
