import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from games import GAMES, Game, select_games
from response import ALREADY_SIGNED_RETCODE


DEFAULT_CONFIG = "config.json"


class ConfigError(RuntimeError):
    pass


@dataclass(frozen=True)
class Account:
    name: str
    cookies: Dict[str, str]


@dataclass
class Config:
    accounts: List[Account]
    healthcheck: Optional[str] = None
    games: List[Game] = field(default_factory=lambda: list(GAMES.values()))
    already_signed_retcode: int = ALREADY_SIGNED_RETCODE


def config_path(cli_path: Optional[str] = None) -> Path:
    return Path(cli_path or os.getenv("HOYOLAB_CONFIG") or DEFAULT_CONFIG)


def _parse_account(i: int, raw) -> Account:
    if not isinstance(raw, dict):
        raise ConfigError(f"accounts[{i}] must be an object")

    name = raw.get("name")
    if not isinstance(name, str) or not name:
        raise ConfigError(f"accounts[{i}].name must be a non-empty string")

    cookies = raw.get("cookies")
    if not isinstance(cookies, dict):
        raise ConfigError(f"accounts[{i}].cookies must be an object")

    return Account(name=name, cookies={str(k): str(v) for k, v in cookies.items()})


def parse_config(data) -> Config:
    if not isinstance(data, dict):
        raise ConfigError("config must be a JSON object")

    accounts = data.get("accounts")
    if not isinstance(accounts, list):
        raise ConfigError("accounts must be a JSON array")

    healthcheck = os.getenv("HOYOLAB_HEALTHCHECK", "").strip() or data.get("healthcheck")
    if healthcheck is not None and not isinstance(healthcheck, str):
        raise ConfigError("healthcheck must be a string")

    keys = data.get("games")
    if keys is not None and not (isinstance(keys, list) and all(isinstance(k, str) for k in keys)):
        raise ConfigError("games must be an array of game identifiers")
    try:
        games = select_games(keys)
    except KeyError as e:
        raise ConfigError(f"unknown game(s): {e.args[0]}")

    retcode = os.getenv("HOYOLAB_ALREADY_SIGNED_RETCODE", "").strip()
    try:
        already_signed = int(retcode) if retcode else ALREADY_SIGNED_RETCODE
    except ValueError:
        raise ConfigError(f"HOYOLAB_ALREADY_SIGNED_RETCODE must be an integer: {retcode}")

    return Config(
        accounts=[_parse_account(i, a) for i, a in enumerate(accounts)],
        healthcheck=healthcheck or None,
        games=games,
        already_signed_retcode=already_signed,
    )


def load_config(path: Path) -> Config:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read {path}: {e}")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}")

    return parse_config(data)
