"""
Command Line Interface

Entry point for running the scraper from command line.

Usage:
    python -m clinic_hours
    python -m clinic_hours clinics.csv -o results.json --csv results.csv
    python -m clinic_hours clinics.csv --fresh --delay 2
"""

import argparse
import logging
import sys

from .config import INPUT_CSV, OUTPUT_CSV, OUTPUT_JSON, PROGRESS_FILE, REQUEST_DELAY
from .config_manager import ScraperConfig
from .exceptions import ClinicHoursError
from .scraper import ClinicHoursScraper


def setup_logging(quiet: bool = False):
    """Plain progress output on stderr; warnings and errors only when quiet."""
    logging.basicConfig(
        level=logging.WARNING if quiet else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Clinic Hours Scraper (SerpAPI Google Maps)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m clinic_hours
  python -m clinic_hours clinics.csv --api-key YOUR_KEY
  python -m clinic_hours clinics.csv -o out/clinics.json --csv out/clinics.csv
  python -m clinic_hours clinics.csv --fresh   # Ignore progress.json and start over
        """
    )

    parser.add_argument(
        "input",
        nargs="?",
        default=INPUT_CSV,
        help=f"Input CSV with a clinic name column (default: {INPUT_CSV})"
    )
    parser.add_argument(
        "-o", "--output",
        default=OUTPUT_JSON,
        help=f"Output JSON file path (default: {OUTPUT_JSON})"
    )
    parser.add_argument(
        "--csv",
        default=OUTPUT_CSV,
        help=f"Output CSV file path (default: {OUTPUT_CSV})"
    )
    parser.add_argument(
        "--progress",
        default=PROGRESS_FILE,
        help=f"Progress marker file path (default: {PROGRESS_FILE})"
    )
    parser.add_argument(
        "-d", "--delay",
        type=float,
        default=REQUEST_DELAY,
        help=f"Delay between requests in seconds (default: {REQUEST_DELAY})"
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="SerpAPI key (default: SERPAPI_API_KEY env var)"
    )
    parser.add_argument(
        "--fresh",
        action="store_true",
        help="Delete previous results and progress, start from the first clinic"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress progress output"
    )
    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.quiet)
    logger = logging.getLogger(__name__)

    try:
        config = ScraperConfig(
            api_key=args.api_key,
            input_csv=args.input,
            output_json=args.output,
            output_csv=args.csv,
            progress_file=args.progress,
            request_delay=args.delay,
        )

        with ClinicHoursScraper(config=config) as scraper:
            clinics = scraper.load()
            config.require_api_key()
            if args.fresh:
                scraper.store.reset()
            state = scraper.run(clinics, resume=not args.fresh)

        if state.halted:
            logger.warning(
                f"Stopped early at {state.last_index}/{len(clinics)}. "
                f"Rerun to continue once the quota resets."
            )
        else:
            logger.info(f"\nDone! Processed {state.last_index} clinics.")

        return 0

    except ClinicHoursError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error(f"\nError: cannot write output ({e}). Progress up to the last checkpoint is kept.")
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted! Progress saved; rerun to continue.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
