import argparse
import logging
import sys

import pandas as pd

from allocator.report_writer import process_frame


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Score intake responses into Multiply / Essentials / Freedom / Enjoyment."
    )
    parser.add_argument("input", help="CSV export of the Working Sheet")
    parser.add_argument(
        "-o", "--output",
        help="where to write the scored sheet (defaults to overwriting INPUT)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log every calculation")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        sheet = pd.read_csv(args.input, dtype=object, keep_default_na=False)
    except FileNotFoundError:
        print(f"Error: input file not found: {args.input}", file=sys.stderr)
        return 1

    scored = process_frame(sheet)
    output = args.output or args.input
    scored.to_csv(output, index=False)

    print(f"Scored {len(scored)} row(s) → {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
