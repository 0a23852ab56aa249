# ruff: noqa: E402
import sentry_sdk
import truststore

truststore.inject_into_ssl()
import asyncio
import contextlib
import logging
import os
import sys
from pathlib import Path
from typing import Iterator

import core
import utilities.config
from utilities.enums import Ruleset

SENTRY_DSN = os.getenv("SENTRY_DSN")
OSU_ENVIRONMENT = os.getenv("OSU_ENVIRONMENT")

sentry_sdk.init(
    dsn=SENTRY_DSN,
    send_default_pii=False,
    traces_sample_rate=1.0,
    environment=OSU_ENVIRONMENT,
)

log = logging.getLogger(__name__)


@contextlib.contextmanager
def setup_logging() -> Iterator[None]:
    """Set up logging."""
    root = logging.getLogger()

    try:
        logging.basicConfig(format="[{asctime}] [{levelname:<8}] {name}: {message}", style="{")
        logging.getLogger("aiohttp.access").setLevel(logging.WARNING)
        root.setLevel(logging.INFO)
        if OSU_ENVIRONMENT == "development":
            logging.getLogger("core").setLevel(logging.DEBUG)
            logging.getLogger("endpoints").setLevel(logging.DEBUG)
            logging.getLogger("utilities").setLevel(logging.DEBUG)
        yield None
    finally:
        handlers = root.handlers[:]
        for hdlr in handlers:
            hdlr.close()
            root.removeHandler(hdlr)


def load_config() -> utilities.config.Config:
    """Load ``configs/<env>.toml`` when present, else the ``OSU_API_*`` environment."""
    name = "prod" if OSU_ENVIRONMENT == "production" else "dev"
    path = Path(__file__).resolve().parent / "configs" / f"{name}.toml"
    if path.exists():
        return utilities.config.load(path)
    return utilities.config.from_env()


async def main(user: str, ruleset: str | None = None) -> None:
    """Look up one user and log a summary."""
    mode = Ruleset[ruleset.upper()] if ruleset else None
    lookup: int | str = int(user) if user.isdigit() else user
    async with core.OsuClient(token=os.environ["OSU_API_TOKEN"], config=load_config()) as osu:
        found = await osu.users.get_user(lookup, mode)
    if found is None:
        log.info("No user %r.", user)
        return
    stats = found.statistics or None
    log.info(
        "%s (#%s, %s): %s pp",
        found.username,
        found.id,
        found.country_code,
        stats.pp if stats else "n/a",
    )


if __name__ == "__main__":
    if len(sys.argv) < 2:
        sys.exit("usage: python main.py <user id or name> [osu|taiko|fruits|mania]")
    with setup_logging():
        try:
            asyncio.run(main(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else None))
        except Exception as e:
            sentry_sdk.capture_exception(e)
            raise
