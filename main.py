"""
ReviewPulse - App Review Analytics

CLI entry point for running the review analysis pipeline.
"""

import argparse
import json
import logging
import re
import sys

from reviewpulse.orchestrator import PipelineOrchestrator
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def review_limit(value: str) -> int:
    """argparse type for --num: integer in 1..MAX_REVIEW_LIMIT."""
    try:
        num = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if not 1 <= num <= settings.MAX_REVIEW_LIMIT:
        raise argparse.ArgumentTypeError(
            f"must be between 1 and {settings.MAX_REVIEW_LIMIT} (got {num})"
        )
    return num


def country_code(value: str) -> str:
    """argparse type for --country: two-letter code."""
    if not re.fullmatch(r"[A-Za-z]{2}", value):
        raise argparse.ArgumentTypeError(f"{value!r} is not a two-letter country code")
    return value.lower()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="ReviewPulse - App Review Analytics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyze stored Google Play reviews
  python main.py reviews --app com.spotify.music --platform android \\
                 --input data/raw/com.spotify.music_android.json

  # Analyze the 50 newest App Store reviews
  python main.py reviews --app 324684580 --platform ios --num 50

  # Analyze stored search results for a keyword
  python main.py market --keyword "habit tracker" --platform ios \\
                 --input data/search/habit_tracker_ios.json
        """
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    parser.add_argument(
        "--data-root",
        default=str(settings.DATA_ROOT),
        help=f"Data directory (default: {settings.DATA_ROOT})"
    )

    parser.add_argument(
        "--output-root",
        default=str(settings.OUTPUT_ROOT),
        help=f"Report directory (default: {settings.OUTPUT_ROOT})"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    reviews = subparsers.add_parser("reviews", help="Analyze an app's reviews")
    reviews.add_argument("--app", required=True, help="App ID (package name or numeric App Store ID)")
    reviews.add_argument("--platform", required=True, choices=settings.PLATFORMS)
    reviews.add_argument(
        "--num",
        type=review_limit,
        default=settings.DEFAULT_REVIEW_LIMIT,
        help=f"Number of reviews to analyze (default: {settings.DEFAULT_REVIEW_LIMIT})"
    )
    reviews.add_argument(
        "--country",
        type=country_code,
        default=settings.DEFAULT_COUNTRY,
        help=f"Two-letter store country, recorded in the report (default: {settings.DEFAULT_COUNTRY})"
    )
    reviews.add_argument("--input", help="JSON file of raw reviews (defaults to data/raw/<app>_<platform>.json)")

    market = subparsers.add_parser("market", help="Analyze search results for a keyword")
    market.add_argument("--keyword", required=True, help="Keyword the search results belong to")
    market.add_argument("--platform", required=True, choices=settings.PLATFORMS)
    market.add_argument("--input", required=True, help="JSON file of store search results")

    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    # Setup logging
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    subject = args.app if args.command == "reviews" else args.keyword

    # Print banner
    print("=" * 60)
    print("ReviewPulse - App Review Analytics")
    print("=" * 60)
    print(f"Command: {args.command}")
    print(f"Target: {subject}")
    print(f"Platform: {args.platform}")
    if args.command == "reviews":
        print(f"Reviews: {args.num}")
        print(f"Country: {args.country}")
        print(f"Mock Data: {settings.USE_MOCK_DATA}")
    print("=" * 60)
    print()

    try:
        orchestrator = PipelineOrchestrator(
            data_root=args.data_root,
            output_root=args.output_root,
            use_mock_data=settings.USE_MOCK_DATA
        )

        if args.command == "reviews":
            output_path = orchestrator.run(
                app_id=args.app,
                platform=args.platform,
                input_path=args.input,
                limit=args.num,
                country=args.country
            )
        else:
            output_path = orchestrator.analyze_market(
                keyword=args.keyword,
                platform=args.platform,
                input_path=args.input
            )

        print()
        print("=" * 60)
        print("✅ Analysis completed successfully!")
        print("=" * 60)
        print(f"Report: {output_path}")
        print("=" * 60)

        logger.info("ReviewPulse completed successfully")
        return 0

    except KeyboardInterrupt:
        logger.warning("Pipeline interrupted by user")
        print("\n⚠️  Pipeline interrupted")
        return 1

    except Exception as e:
        logger.error(f"Pipeline failed: {e}", exc_info=True)
        key = "app_id" if args.command == "reviews" else "keyword"
        print(json.dumps({"error": str(e), key: subject, "platform": args.platform}, indent=2))
        print(f"Check {settings.LOG_FILE} for details")
        return 1


if __name__ == "__main__":
    sys.exit(main())


# Design Rationale and Trade-offs:
#
# 1. Why subcommands instead of one flat command?
#    - Review analysis and market analysis take different inputs
#    - argparse enforces the required flags of each
#    - Trade-off: Slightly longer invocations
#
# 2. Why validate --num and --country in argparse types?
#    - Bad input is rejected before any file is touched
#    - argparse prints a usage message and exits with code 2
#    - Trade-off: Validation rules live in the CLI, not in the agents
#
# 3. Why print a JSON error document on failure?
#    - Callers wrapping the CLI can parse the failure
#    - Names the app or keyword and platform that failed
#    - Trade-off: Full traceback only goes to the log file
#
# 4. Why record --country in the report instead of filtering by it?
#    - Raw files are already scraped for one store country
#    - The report states which country its reviews came from
#    - Trade-off: Nothing checks that the file matches the country
