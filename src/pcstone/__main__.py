"""
Entry point: `python -m pcstone` or the `pcstone` console script.
"""

import argparse
import sys

from pcstone.core.debug.debug_logger import LoggerConfig
from pcstone.core.runtime.main_loop import MainLoop


def main(argv=None):
    parser = argparse.ArgumentParser(description="PCStone - two-player cake fight")
    parser.add_argument("--scale", type=int, default=None,
                        help="Window scale factor (overrides controls.yaml)")
    parser.add_argument("--log-level", default=LoggerConfig.LOG_LEVEL,
                        choices=["NONE", "ERROR", "WARN", "INFO", "VERBOSE"],
                        help="Console log verbosity")
    args = parser.parse_args(argv)

    LoggerConfig.LOG_LEVEL = args.log_level
    MainLoop(scale=args.scale).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
