import argparse
import os
import sys

from .ast import format_value
from .export import export_csv
from .main import run_line, run_lines

PROMPT = 'Basic > '


def print_result(result):
    if result.error is not None:
        print(f"Error: {result.error}")
        return
    if result.tree is None:
        return
    print(result.tree)
    print(result.tokens)
    print(format_value(result.value))


def repl(strict=False, debug=False):
    """Reads lines from stdin until end of input, printing each result."""
    # Undecodable bytes on stdin fail as one bad line, not the session
    if hasattr(sys.stdin, 'reconfigure'):
        sys.stdin.reconfigure(errors='replace')
    line = 0
    while True:
        try:
            text = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            return
        line += 1
        print_result(run_line(text, 'stdin', strict=strict, debug=debug, line=line))


def run_file(filename, strict=False, debug=False):
    # Undecodable bytes become U+FFFD and fail on their own line
    with open(filename, 'r', encoding='utf-8', errors='replace') as file:
        lines = file.readlines()

    results = run_lines(lines, filename, strict=strict, debug=debug)
    for result in results:
        print_result(result)

    # In debug mode, save every line's result next to the input
    if debug:
        csv_filename = os.path.splitext(filename)[0] + '.csv'
        export_csv(results, csv_filename)
        print(f"\nResults saved to: {csv_filename}")
    return results


def main(argv=None):
    parser = argparse.ArgumentParser(description='Basic arithmetic interpreter')
    parser.add_argument('filename', nargs='?', help='File with one expression per line; reads stdin when omitted')
    parser.add_argument('--strict', action='store_true', help='Reject tokens left after the expression')
    parser.add_argument('--debug', action='store_true', help='Print each stage and save file results as CSV')

    args = parser.parse_args(argv)

    if args.filename is None:
        repl(strict=args.strict, debug=args.debug)
        return 0

    try:
        run_file(args.filename, strict=args.strict, debug=args.debug)
    except FileNotFoundError:
        print(f"Error: File '{args.filename}' not found")
        return 1
    except Exception as e:
        print(f"Error: {str(e)}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
