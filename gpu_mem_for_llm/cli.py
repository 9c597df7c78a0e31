#!/usr/bin/env python3
"""
Command-line entry point: gpu-mem-for-llm --size 7b --fp16 --overhead 30
"""

import argparse
import logging
import sys
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from gpu_mem_for_llm import __version__
from gpu_mem_for_llm.config import EstimateConfig, default_log_level, default_overhead
from gpu_mem_for_llm.errors import EstimateError
from gpu_mem_for_llm.estimator import estimate_from_config
from gpu_mem_for_llm.formatter import render
from gpu_mem_for_llm.precision import Precision, select_precision

logger = logging.getLogger(__name__)

PROG = "gpu-mem-for-llm"

DESCRIPTION = """\
Provide your model parameter size, precision and a percentage
overhead to calculate the estimated gpu memory required
to run the model.
"""

EPILOG = """\
Examples:
  %(prog)s --size 7b --fp16 --overhead 30
  %(prog)s --size 100m --fp32 --json

Flag details:
   --size: Specifies the size of the model parameters (e.g., "7b" for 7 billion).
           This flag is required.
   --fp32 | --fp16 | --bf16 | --int8 | --int4: These flags indicate the precision
           used to serve the model and determine the memory requirement.
           Exactly one of them must be specified.
   --overhead: Optional overhead percentage as an integer (e.g., "30" for 30%%).
           Defaults to 20%% or $GPU_MEM_FOR_LLM_OVERHEAD when set.
"""


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {number}")
    return number


class EstimatorCLI:
    """
    Parses flags into an EstimateConfig, runs the estimate and prints one line.
    """

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create and configure the argument parser for the CLI."""
        parser = argparse.ArgumentParser(
            prog=PROG,
            description=DESCRIPTION,
            epilog=EPILOG,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        parser.add_argument(
            "--size", "-s",
            required=True,
            help="Model parameter size (e.g., 7b) - required",
        )

        # Exclusivity is checked by select_precision so the message is ours
        for precision in Precision:
            parser.add_argument(
                precision.flag,
                action="store_true",
                help=f"Use {precision.value} precision ({precision.bytes_per_param:g} bytes/param)",
            )

        parser.add_argument(
            "--overhead", "-o",
            type=non_negative_int,
            default=default_overhead(),
            help="Overhead as a percentage (default: %(default)s)",
        )

        parser.add_argument(
            "--json",
            dest="json_output",
            action="store_true",
            help="Output results in JSON format",
        )

        parser.add_argument(
            "--version", "-v",
            action="version",
            version=f"%(prog)s {__version__}",
            help="Print the version number",
        )

        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Log the estimate breakdown to stderr",
        )

        return parser

    def build_config(self, args: argparse.Namespace) -> EstimateConfig:
        """Validate parsed flags and freeze them into an EstimateConfig."""
        precision = select_precision({p.value: getattr(args, p.value) for p in Precision})
        return EstimateConfig(
            size=args.size,
            precision=precision,
            overhead=args.overhead,
            json_output=args.json_output,
        )

    def run(self, argv: Optional[List[str]] = None) -> int:
        args = self.parser.parse_args(argv)
        setup_logging(args.verbose)

        try:
            config = self.build_config(args)
            estimate = estimate_from_config(config)
        except EstimateError as e:
            logger.debug(f"Rejected input: {e}")
            print(f"Error: {e}", file=sys.stderr)
            return 1

        print(render(estimate.total_bytes, config.json_output))
        return 0


def setup_logging(verbose: bool = False) -> None:
    level = logging.INFO if verbose else getattr(logging, default_log_level(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )
    logging.getLogger("gpu_mem_for_llm").setLevel(level)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    return EstimatorCLI().run(argv)


if __name__ == "__main__":
    sys.exit(main())
