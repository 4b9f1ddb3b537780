"""CLI entry point: run the bot against an in-memory demo room.

Usage:
    python -m creeptick                     # 50 ticks, default settings
    python -m creeptick --ticks 300 --seed 7
    python -m creeptick --sources 2 --log-level INFO
"""

from __future__ import annotations

import argparse
import sys

from creeptick.config import BotSettings
from creeptick.core.identity import FixedSeed, NameGenerator
from creeptick.cycle import Bot
from creeptick.host import LocalHost
from creeptick.log import setup_logging


def build_demo_host(sources: int = 1) -> LocalHost:
    """One room with a spawn, a controller and `sources` energy sources."""
    host = LocalHost()
    room = host.add_room("W1N1")
    host.add_spawn(room, "Spawn1", 25, 25)
    host.add_controller(room, 40, 40)
    for i in range(sources):
        host.add_source(room, 10 + 5 * i, 10)
    return host


def run(bot: Bot, host: LocalHost, ticks: int) -> None:
    """Run the bot for a number of ticks, printing a summary line per tick."""
    for _ in range(ticks):
        report = bot.tick(host)
        actions = ", ".join(f"{a.value}={n}" for a, n in sorted(report.actions.items()))
        print(
            f"tick {report.tick:>4}: creeps={report.creeps_run} "
            f"assigned={len(report.assigned)} released={len(report.released)} "
            f"spawned={len(report.spawn_requests)} [{actions}]"
        )
        host.advance()

    controller = host.rooms["W1N1"].controller
    progress = controller.progress if controller is not None else 0
    print(f"\nController progress after {ticks} ticks: {progress}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run creeptick against a demo room")
    parser.add_argument("--ticks", type=int, default=50, help="Number of ticks to run")
    parser.add_argument("--seed", type=int, default=None, help="Fixed seed for creep names")
    parser.add_argument("--sources", type=int, default=1, help="Energy sources in the room")
    parser.add_argument("--log-level", default=None, help="Overrides CREEPTICK_LOG_LEVEL")
    args = parser.parse_args(argv)

    settings = BotSettings()
    setup_logging(args.log_level or settings.log_level)

    generator = NameGenerator(FixedSeed(args.seed)) if args.seed is not None else None
    bot = Bot(settings, generator=generator)
    run(bot, build_demo_host(args.sources), args.ticks)
    return 0


if __name__ == "__main__":
    sys.exit(main())
