"""
Command Line Interface Module

This module provides the command-line interface for computing
a fan speed from a fan curve and a measured temperature.
"""

import argparse
import logging
import sys
from typing import List, Optional

from ..config import anchor_from_config, build_curve, load_config, DEFAULT_CONFIG
from ..control import FanCurveError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Set default log levels for fancurve modules
LOGGERS = ['fancurve.config', 'fancurve.control.curve', 'fancurve.cli.interface']
for name in LOGGERS:
    logging.getLogger(name).setLevel(logging.INFO)


def format_pwm(speed: int) -> str:
    """Format a fan speed the way fan control scripts read it"""
    return f"pwm_{speed:03d}"


class CLI:
    """Command-line interface handler"""

    def __init__(self):
        """Initialize CLI handler"""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create command-line argument parser

        Returns:
            Configured argument parser
        """
        parser = argparse.ArgumentParser(
            description="Fancurve - compute a fan speed from a temperature"
        )

        parser.add_argument(
            "points",
            nargs="*",
            metavar="POINT",
            help="Control point as <temperature>:<speed>"
        )

        parser.add_argument(
            "-c", "--config",
            help="Path to configuration file"
        )

        parser.add_argument(
            "-t", "--temperature",
            type=float,
            required=True,
            help="Measured temperature"
        )

        parser.add_argument(
            "--debug",
            action="store_true",
            help="Enable debug logging"
        )

        return parser

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Run the CLI interface

        Args:
            argv: Arguments to parse, defaults to sys.argv

        Returns:
            Process exit status
        """
        args = self.parser.parse_args(argv)

        if args.debug:
            for name in LOGGERS:
                logging.getLogger(name).setLevel(logging.DEBUG)

        try:
            config = load_config(args.config) if args.config else dict(DEFAULT_CONFIG)
            curve = build_curve(
                list(config["curve"]) + args.points,
                anchor=anchor_from_config(config)
            )
        except FanCurveError as e:
            logger.error(f"Error: {e}")
            return 1

        pwm = curve.evaluate(args.temperature)

        logger.info(f"Current temperature of {args.temperature}, computed fan speed of {pwm}")
        print(format_pwm(pwm))
        return 0


def main() -> None:
    """Main entry point"""
    cli = CLI()
    sys.exit(cli.run())

if __name__ == "__main__":
    main()
