#!/usr/bin/env python3
"""
Main entry point for Elevens.
Run a batch of automatically played games and print the results.
"""

import argparse
import logging
from elevens.simulation import ElevensSimulation
from elevens.utils import setup_logging, format_summary, GameLogger


def main(argv=None):
    parser = argparse.ArgumentParser(description="Simulate games of Elevens")
    parser.add_argument('--games', type=int, default=1,
                       help='Number of games to play')
    parser.add_argument('--max-plays', type=int, default=None,
                       help='Stop each game after this many plays')
    parser.add_argument('--verbose', action='store_true',
                       help='Enable verbose logging')
    parser.add_argument('--log-file', default=None,
                       help='Also write the log to this file')

    args = parser.parse_args(argv)

    if args.games < 1:
        parser.error("--games must be at least 1")

    setup_logging(log_file=args.log_file,
                  level=logging.DEBUG if args.verbose else logging.WARNING)

    simulation = ElevensSimulation(args.games, args.max_plays,
                                   logger=GameLogger())
    summary = simulation.run()

    print(format_summary(summary))
    return summary


if __name__ == "__main__":
    main()
