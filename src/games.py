# Game-specific endpoints for the daily check-in.
# Check-in page URLs are kept for user reference only.

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional


HOYOLAB_GI_URL = "https://act.hoyolab.com/ys/event/signin-sea-v3/index.html?act_id=e202102251931481&lang=en-us"
HOYOLAB_HSR_URL = "https://act.hoyolab.com/bbs/event/signin/hkrpg/index.html?act_id=e202303301540311&lang=en-us"
HOYOLAB_ZZZ_URL = "https://act.hoyolab.com/bbs/event/signin/zzz/e202406031448091.html?act_id=e202406031448091&lang=en-us"


@dataclass(frozen=True)
class Game:
    key: str
    name: str
    act_id: str
    info_url: str
    sign_url: str
    signgame: Optional[str] = None
    page_url: str = ""


GAMES: Dict[str, Game] = {
    g.key: g
    for g in [
        Game(
            key="genshin",
            name="Genshin Impact",
            act_id="e202102251931481",
            info_url="https://sg-hk4e-api.hoyolab.com/event/sol/info",
            sign_url="https://sg-hk4e-api.hoyolab.com/event/sol/sign",
            page_url=HOYOLAB_GI_URL,
        ),
        Game(
            key="starrail",
            name="Honkai Star Rail",
            act_id="e202303301540311",
            info_url="https://sg-public-api.hoyolab.com/event/luna/os/info",
            sign_url="https://sg-public-api.hoyolab.com/event/luna/os/sign",
            page_url=HOYOLAB_HSR_URL,
        ),
        Game(
            key="zenless",
            name="Zenless Zone Zero",
            act_id="e202406031448091",
            info_url="https://sg-public-api.hoyolab.com/event/luna/zzz/os/info",
            sign_url="https://sg-public-api.hoyolab.com/event/luna/zzz/os/sign",
            signgame="zzz",
            page_url=HOYOLAB_ZZZ_URL,
        ),
    ]
}


def select_games(keys: Optional[Iterable[str]] = None) -> List[Game]:
    """Return games in registry order, optionally limited to ``keys``.

    Raises KeyError for an identifier that is not in the registry.
    """
    if keys is None:
        return list(GAMES.values())

    wanted = set(keys)
    unknown = sorted(wanted - set(GAMES))
    if unknown:
        raise KeyError(", ".join(unknown))
    return [g for g in GAMES.values() if g.key in wanted]
