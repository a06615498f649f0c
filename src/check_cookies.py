import argparse

import requests

from checkin import HoyolabCheckin
from config import ConfigError, config_path, load_config
from hoyolab_common import load_env, mask
from response import RemoteError, TransportError


def check_account(checkin: HoyolabCheckin, games) -> bool:
    print(f"\n== {checkin.account.name} ==")
    print("Cookie summary (masked):")
    for k, v in checkin.account.cookies.items():
        print(f"- {k}: {mask(v)}")

    ok = True
    for game in games:
        try:
            signed = checkin.get_status(game)
        except RemoteError as e:
            print(f"{game.name}: retcode {e.retcode}, message: {e}")
            print(f"  check-in page: {game.page_url}")
            ok = False
            continue
        except TransportError as e:
            print(f"{game.name}: {e}")
            print(f"  check-in page: {game.page_url}")
            ok = False
            continue
        print(f"{game.name}: retcode 0, is_sign: {signed}")
    return ok


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Check HoYoLAB cookies of every configured account without claiming.")
    ap.add_argument("--config", default=None, help="Path to config.json (default: $HOYOLAB_CONFIG or ./config.json).")
    args = ap.parse_args(argv)

    load_env()
    try:
        config = load_config(config_path(args.config))
    except ConfigError as e:
        print(f"ERROR: {e}")
        return 2

    with requests.Session() as session:
        results = [
            check_account(HoyolabCheckin(a, session, already_signed_retcode=config.already_signed_retcode), config.games)
            for a in config.accounts
        ]
    return 0 if all(results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
