"""Unit tests for seed storage and loading."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from xls20.identity.wallet import generate_seed, get_address, get_wallet, load_config, load_seed, save_seed


def test_generate_seed_is_unique() -> None:
    seeds = {generate_seed()[0] for _ in range(3)}
    assert len(seeds) == 3


def test_address_matches_seed() -> None:
    seed, address = generate_seed()
    assert address.startswith("r")
    assert get_address(seed) == address
    assert get_wallet(seed).classic_address == address


def test_save_preserves_other_entries(tmp_path: Path) -> None:
    env_path = tmp_path / ".xls20" / ".env"
    env_path.parent.mkdir()
    env_path.write_text("# comment\nXRPL_NETWORK=Testnet\n", encoding="utf-8")

    seed, _ = generate_seed()
    save_seed(seed, env_path)

    content = env_path.read_text(encoding="utf-8")
    assert "XRPL_NETWORK=Testnet" in content
    assert f"XRPL_SEED={seed}" in content
    if os.name != "nt":
        assert (env_path.stat().st_mode & 0o777) == 0o600


def test_load_from_env_file(tmp_path: Path) -> None:
    seed, _ = generate_seed()
    env_path = save_seed(seed, tmp_path / ".env")
    env = {k: v for k, v in os.environ.items() if k != "XRPL_SEED"}
    with patch.dict(os.environ, env, clear=True):
        assert load_seed(env_path) == seed


def test_load_from_environment() -> None:
    seed, _ = generate_seed()
    with patch.dict(os.environ, {"XRPL_SEED": seed}):
        assert load_seed(Path("/nonexistent/.env")) == seed


def test_load_missing() -> None:
    env = {k: v for k, v in os.environ.items() if k != "XRPL_SEED"}
    with patch.dict(os.environ, env, clear=True):
        with pytest.raises(ValueError, match="XRPL_SEED not found"):
            load_seed(Path("/nonexistent/.env"))


def test_load_config_keeps_process_environment(tmp_path: Path) -> None:
    env_path = tmp_path / ".env"
    env_path.write_text("XRPL_NETWORK=Testnet\nXRPL_FAUCET_HOST=faucet.example.com\n", encoding="utf-8")
    env = {k: v for k, v in os.environ.items() if not k.startswith("XRPL_")}
    env["XRPL_NETWORK"] = "Devnet"
    with patch.dict(os.environ, env, clear=True):
        assert load_config(env_path)
        assert os.environ["XRPL_NETWORK"] == "Devnet"
        assert os.environ["XRPL_FAUCET_HOST"] == "faucet.example.com"


def test_load_config_missing_file() -> None:
    assert not load_config(Path("/nonexistent/.env"))
