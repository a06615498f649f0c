import argparse
from typing import Iterable, Optional

import requests

from config import Account, Config, ConfigError, config_path, load_config
from games import Game
from hoyolab_common import load_env, make_headers
from response import ALREADY_SIGNED_RETCODE, RemoteError, TransportError, decode_claim, decode_status, read_json


LANG = "en-us"
TIMEOUT = 20


class HoyolabCheckin:
    """Daily check-in of one account, game by game."""

    def __init__(
        self,
        account: Account,
        session: Optional[requests.Session] = None,
        already_signed_retcode: int = ALREADY_SIGNED_RETCODE,
        timeout: float = TIMEOUT,
    ):
        self.account = account
        # Module-level requests.request is used when no session is shared.
        self.session = session or requests
        self.already_signed_retcode = already_signed_retcode
        self.timeout = timeout

    def _request(self, method: str, url: str, game: Game, **kwargs):
        try:
            r = self.session.request(
                method,
                url,
                headers=make_headers(game, self.account.cookies),
                timeout=self.timeout,
                **kwargs,
            )
        except requests.RequestException as e:
            raise TransportError(str(e))
        return read_json(r)

    def get_status(self, game: Game) -> bool:
        payload = self._request("GET", game.info_url, game, params={"lang": LANG, "act_id": game.act_id})
        return decode_status(payload).is_sign

    def sign(self, game: Game) -> None:
        payload = self._request("POST", game.sign_url, game, params={"lang": LANG}, json={"act_id": game.act_id})
        decode_claim(payload, self.already_signed_retcode)

    def process_game(self, game: Game) -> bool:
        name = self.account.name

        try:
            signed = self.get_status(game)
        except (TransportError, RemoteError) as e:
            print(f"Failed check-in for {name} on {game.name}: {e}")
            return False

        if signed:
            print(f"Daily check-in already done for {name} on {game.name}!")
            return True

        try:
            self.sign(game)
        except (TransportError, RemoteError) as e:
            print(f"Failed to sign in for {name} on {game.name}: {e}")
            return False

        # The sign endpoint can report success without granting the reward.
        try:
            signed = self.get_status(game)
        except (TransportError, RemoteError):
            signed = False

        if signed:
            print(f"Daily check-in successful for {name} on {game.name}!")
            return True

        print(f"ERROR: Unable to claim check-in rewards for {name} on {game.name}")
        return False

    def process(self, games: Iterable[Game]) -> bool:
        # Every game is attempted even after a failure.
        results = [self.process_game(g) for g in games]
        return all(results)


def notify_healthcheck(url: str, success: bool, session: Optional[requests.Session] = None) -> None:
    target = url if success else f"{url.rstrip('/')}/fail"
    try:
        (session or requests).get(target, timeout=TIMEOUT)
    except requests.RequestException:
        pass


def run(config: Config, session: Optional[requests.Session] = None) -> bool:
    if session is None:
        with requests.Session() as session:
            return run(config, session)

    success = True

    for account in config.accounts:
        checkin = HoyolabCheckin(account, session, already_signed_retcode=config.already_signed_retcode)
        if not checkin.process(config.games):
            success = False

    if config.healthcheck:
        notify_healthcheck(config.healthcheck, success, session)

    return success


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Claim HoYoLAB daily check-in rewards for every configured account.")
    ap.add_argument("--config", default=None, help="Path to config.json (default: $HOYOLAB_CONFIG or ./config.json).")
    ap.add_argument("--exit-zero", action="store_true", help="Exit 0 even when a check-in failed.")
    args = ap.parse_args(argv)

    load_env()
    try:
        config = load_config(config_path(args.config))
    except ConfigError as e:
        print(f"ERROR: {e}")
        return 2

    success = run(config)
    if success or args.exit_zero:
        return 0
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
