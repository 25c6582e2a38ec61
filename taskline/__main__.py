"""Demo: python -m taskline"""

import argparse
import time

from taskline.config import load_config
from taskline.tasks import TaskDisplay


def demo(display: TaskDisplay, pause: float):
    display.start("build")
    time.sleep(pause)
    display.start("compile")
    for unit in ("parser", "render", "stack"):
        display.start(f"{unit}.o")
        time.sleep(pause)
        display.succeed(f"{unit}.o")
    display.succeed("compile done")
    display.start("link")
    time.sleep(pause)
    display.warn("linked with 1 unresolved weak symbol")
    display.start("test")
    time.sleep(pause)
    display.fail("2 of 40 tests failed")
    display.warn("build finished with warnings")


def main(argv=None):
    parser = argparse.ArgumentParser(prog="taskline", description="Show a nested task demo.")
    parser.add_argument("--config", help="YAML file with display settings")
    parser.add_argument("--pause", type=float, default=0.6,
                        help="seconds each demo step takes (default: 0.6)")
    args = parser.parse_args(argv)

    demo(TaskDisplay(config=load_config(args.config)), args.pause)


if __name__ == "__main__":
    main()
