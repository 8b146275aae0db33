#!/usr/bin/env python3
"""
democap - capture screenshots of the workshop demo page

Usage:
    democap                 # run the capture sequence
    democap --diagnose      # only check that the dev server answers
"""

import sys
import argparse
import json

from .config import config, describe_config
from .diagnostics import get_logger, configure_logging, diagnose_url_issue, is_reachable
from .error_handler import format_user_friendly_error
from .sequencer import run_capture

logger = get_logger(__name__)


def _configure_logging(args):
    if args.verbose:
        configure_logging("DEBUG")
    elif args.quiet:
        configure_logging("ERROR")
    else:
        configure_logging("INFO")


def cmd_capture(args) -> int:
    logger.debug(json.dumps(describe_config(config), ensure_ascii=False, default=str))
    try:
        result = run_capture(config)
    except Exception as e:
        friendly = format_user_friendly_error(e)
        print(f"❌ Error taking screenshots: {e}", file=sys.stderr)
        print(f"💡 {friendly['suggestion']}", file=sys.stderr)
        return 1

    print(f"✅ Screenshots saved to {config.screenshot_dir}/ directory!")
    for path in result.paths:
        print(f"   - {path}")
    return 0


def cmd_diagnose(args) -> int:
    diag = diagnose_url_issue(config.base_url)
    print(json.dumps(diag, ensure_ascii=False, indent=2))
    return 0 if is_reachable(diag) else 1


def main(argv=None):
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="Capture screenshots of the demo page in its empty, filled and submitted states",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--diagnose', action='store_true', help='Check that the target page answers, then exit')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')
    parser.add_argument('--quiet', '-q', action='store_true', help='Quiet mode')

    args = parser.parse_args(argv)
    _configure_logging(args)

    if args.diagnose:
        return cmd_diagnose(args)
    return cmd_capture(args)


if __name__ == "__main__":
    sys.exit(main())
