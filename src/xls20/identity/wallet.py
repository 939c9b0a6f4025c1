"""
XRP Ledger credential management.

The account seed signs every transaction the client submits.  Seeds are
stored in ~/.xls20/.env as XRPL_SEED, or supplied through the environment.

Dependencies: xrpl-py (key derivation), python-dotenv (.env loading)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from xrpl.wallet import Wallet


# Default config directory
XLS20_DIR = Path.home() / ".xls20"
XLS20_ENV = XLS20_DIR / ".env"


def generate_seed() -> tuple[str, str]:
    """
    Generate a new XRP Ledger keypair.

    Returns:
        Tuple of (seed, classic_address)
    """
    wallet = Wallet.create()
    return wallet.seed, wallet.classic_address


def save_seed(seed: str, env_path: Optional[Path] = None) -> Path:
    """
    Save a seed to the .env file, preserving other entries.

    Args:
        seed: Family seed ("s...")
        env_path: Path to .env file (default: ~/.xls20/.env)

    Returns:
        Path to the saved .env file
    """
    env_path = env_path or XLS20_ENV
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing = {}
    if env_path.exists():
        for line in env_path.read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                k, v = line.split("=", 1)
                existing[k.strip()] = v.strip()

    existing["XRPL_SEED"] = seed

    lines = [f"{k}={v}" for k, v in existing.items()]
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    # Set secure permissions on Unix
    if os.name != "nt":
        env_path.chmod(0o600)

    return env_path


def load_config(env_path: Optional[Path] = None) -> bool:
    """
    Load XRPL_* settings from the .env file into the environment.

    Variables already set in the process environment take precedence.

    Returns:
        True if a config file was found and loaded
    """
    env_path = env_path or XLS20_ENV
    if not env_path.exists():
        return False
    return load_dotenv(env_path, override=False)


def load_seed(env_path: Optional[Path] = None) -> str:
    """
    Load the seed from the .env file or environment.

    Raises:
        ValueError: If XRPL_SEED is not set
    """
    env_path = env_path or XLS20_ENV
    load_config(env_path)

    seed = os.environ.get("XRPL_SEED", "").strip()
    if not seed:
        raise ValueError(
            f"XRPL_SEED not found. Run 'xls20 wallet new' or set "
            f"XRPL_SEED in {env_path}"
        )
    return seed


def get_wallet(seed: Optional[str] = None) -> Wallet:
    """Get a Wallet for a seed; loads it from .env when None."""
    if seed is None:
        seed = load_seed()
    return Wallet.from_seed(seed)


def get_address(seed: Optional[str] = None) -> str:
    """Get the classic address ("r...") for a seed."""
    return get_wallet(seed).classic_address
