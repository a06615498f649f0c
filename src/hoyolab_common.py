import os
from pathlib import Path
from typing import Dict, Mapping

from dotenv import load_dotenv

from games import Game


USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/116.0.0.0 Safari/537.36"
HOYOLAB_ORIGIN = "https://act.hoyolab.com"
APP_VERSION = "2.34.1"
CLIENT_TYPE = "4"


def _find_env_file() -> str:
    # Prefer ".env" in current dir, then next to script, then repo root.
    here = Path(__file__).resolve().parent
    repo = here.parent
    candidates = [
        Path.cwd() / ".env",
        here / ".env",
        repo / ".env",
    ]
    for p in candidates:
        if p.exists():
            return str(p)
    return str(Path.cwd() / ".env")


def load_env() -> None:
    path = _find_env_file()
    if not os.path.exists(path):
        return
    load_dotenv(path, override=False)


def mask(v: str) -> str:
    if not v:
        return "(empty)"
    if len(v) <= 8:
        return "*" * len(v)
    return f"{v[:4]}...{v[-4:]}"


def cookie_header(cookies: Mapping[str, str]) -> str:
    return "; ".join(f"{k}={v}" for k, v in cookies.items())


def make_headers(game: Game, cookies: Mapping[str, str]) -> Dict[str, str]:
    headers = {
        "Accept": "application/json, text/plain, */*",
        "Accept-Language": "en-US,en;q=0.5",
        "Origin": HOYOLAB_ORIGIN,
        "Referer": HOYOLAB_ORIGIN,
        "Content-Type": "application/json;charset=utf-8",
        "User-Agent": USER_AGENT,
        "x-rpc-app_version": APP_VERSION,
        "x-rpc-client_type": CLIENT_TYPE,
        "Cookie": cookie_header(cookies),
    }
    if game.signgame:
        headers["x-rpc-signgame"] = game.signgame
    return headers
