import argparse
import logging
import sys
from commands import compare

USAGE_EXAMPLE = """Example:
  chaosdiff \\
    -n chaos-output-2025-06-08 \\
    -p chaos-output-2025-06-07 \\
    -o results \\
    -v \\
    --nu"""

def build_parser():
    # The main parser
    parser = argparse.ArgumentParser(
        prog="chaosdiff",
        description="Compare two chaos-output folders and identify added, removed, and unchanged URLs per program.",
        epilog=USAGE_EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # Defaults stay None so values from --config can fill the gaps
    parser.add_argument("-n", "--new", "--today", dest="new_dir", help="Path to today's chaos-output folder.")
    parser.add_argument("-p", "--old", "--yesterday", dest="old_dir", help="Path to yesterday's chaos-output folder.")
    parser.add_argument("-o", "--output", dest="output_dir", help="Output directory for comparison results (default: results).")
    parser.add_argument("-v", "--verbose", action="store_true", default=None, help="Log added/removed/unchanged counts per program.")
    parser.add_argument("--nu", "--no-unchanged", dest="no_unchanged", action="store_true", default=None, help="Skip writing 'unchanged.txt' files.")
    parser.add_argument("-c", "--config", help="INI file with a [compare] section providing default values.")
    parser.set_defaults(func=compare.run, print_usage=parser.print_usage)
    return parser

# The main entry point for chaosdiff
def main(argv=None):
    parser = build_parser()
    # Parse the arguments
    args = parser.parse_args(argv)

    logging.basicConfig(stream=sys.stderr, level=logging.INFO, format="[%(levelname)s] %(message)s")

    args.func(args)
    return 0

if __name__ == "__main__":
    main()
