#!/usr/bin/env python3
import os
import sys
from pathlib import Path
import subprocess


CARD_SIZES = ["Small", "Medium", "Large"]
DRAW_COUNTS = ["3", "1"]
LOG_LEVELS = ["WARNING", "INFO", "DEBUG"]


def pick(prompt, options):
    while True:
        print(prompt)
        for i, opt in enumerate(options, 1):
            print(f"  {i}) {opt}")
        sel = input("> ").strip()
        try:
            idx = int(sel) - 1
            if 0 <= idx < len(options):
                return idx
        except ValueError:
            pass
        print("Invalid selection, please try again.\n")


def main():
    print("Manual Klondike Launcher (developer-only)\n")
    card_size = CARD_SIZES[pick("Select card size:", CARD_SIZES)]
    draw_count = DRAW_COUNTS[pick("Cards dealt per stock click:", DRAW_COUNTS)]
    log_level = LOG_LEVELS[pick("Log level:", LOG_LEVELS)]

    # Build environment for child process
    env = dict(os.environ)
    env["KLONDIKE_CARD_SIZE"] = card_size
    env["KLONDIKE_DRAW_COUNT"] = draw_count
    env["KLONDIKE_LOG_LEVEL"] = log_level

    # Repo root is two levels up from this file: tests/manual/..
    repo_root = Path(__file__).resolve().parents[2]
    env["PYTHONPATH"] = os.pathsep.join(p for p in (str(repo_root / "src"), env.get("PYTHONPATH", "")) if p)
    print("\nLaunching:")
    print(f"  CardSize : {card_size}")
    print(f"  Draw     : {draw_count}")
    print(f"  LogLevel : {log_level}")
    print("")
    try:
        subprocess.run([sys.executable, "-m", "klondike"], cwd=str(repo_root), env=env, check=False)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
