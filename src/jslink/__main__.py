"""CLI entry point: run `jslink main.js` or `python -m jslink < main.js`."""

import sys
from pathlib import Path
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    import argparse
    from .compiler.driver import LinkerDriver
    from .shared.errors import ErrorReporter, LinkError
    from .utils.io_utils import read_source_file, read_stream, write_output_file
    from .utils.logging_config import setup_logging

    parser = argparse.ArgumentParser(prog="jslink", description="Link a JavaScript file and its #import directives into one script.")
    parser.add_argument("file", nargs="?", default="-", help="Root source file (default: read stdin)")
    parser.add_argument("-o", "--output", type=Path, help="Write the linked script here instead of stdout")
    parser.add_argument("-I", "--search-root", type=Path,
                        help="Module folder (default: the file's directory, or the current directory for stdin)")
    parser.add_argument("--log-level", default=None, help="Logging level (default: $JSLINK_LOG_LEVEL or WARNING)")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    if args.file == "-":
        source = read_stream(sys.stdin)
        source_file = "<stdin>"
        search_root = args.search_root or Path.cwd()
    else:
        path = Path(args.file).resolve()
        if not path.exists():
            sys.stderr.write(f"jslink: error: file not found: {path}\n")
            return 1
        if not path.is_file():
            sys.stderr.write(f"jslink: error: not a file: {path}\n")
            return 1
        try:
            source = read_source_file(path)
        except (OSError, UnicodeDecodeError) as e:
            sys.stderr.write(f"jslink: error: could not read file: {e}\n")
            return 1
        source_file = str(path)
        search_root = args.search_root or path.parent

    driver = LinkerDriver()
    try:
        output = driver.build(source, search_root, source_file)
    except LinkError as e:
        ErrorReporter({source_file: source}).print_error(e)
        return 1

    if args.output is not None:
        try:
            write_output_file(args.output, output)
        except OSError as e:
            sys.stderr.write(f"jslink: error: could not write output: {e}\n")
            return 1
    else:
        sys.stdout.write(output)
        sys.stdout.flush()

    return 0


if __name__ == "__main__":
    sys.exit(main())
