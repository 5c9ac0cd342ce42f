import argparse
import sys

from importjs import ConsoleLogger, ImportJsError, bundle, load_config


def parse_mapping(value):
    """Parse a SRC=DEST command line argument."""
    source, sep, destination = value.partition("=")
    if not sep or not source or not destination:
        raise argparse.ArgumentTypeError(f"expected SRC=DEST, got '{value}'")
    return source, destination


def cmd_build(args):
    try:
        config = load_config(args.config)
    except ImportJsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.mappings:
        # Paths given on the command line are relative to the working directory
        config.destinations = dict(args.mappings)
        config.base_dir = None
    if args.no_write:
        config.write_file = False

    logger = ConsoleLogger(verbose=args.verbose)
    task = config.build_task(logger=logger)
    try:
        result = task.run()
    except ImportJsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if result.is_err():
        print(f"Error: {result.message}", file=sys.stderr)
        sys.exit(int(result.exit_code))

    logger.info(result.message)


def cmd_resolve(args):
    logger = ConsoleLogger(verbose=args.verbose)
    try:
        content = bundle(args.filename, logger=logger)
    except ImportJsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.stdout.write(content)


def main():
    parser = argparse.ArgumentParser(description="Inline roboimport('...'); statements in JavaScript files")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output (sent to stderr)")
    subparsers = parser.add_subparsers(dest="command")

    build = subparsers.add_parser("build", help="Replace imports of sources and write them to their destinations")
    build.add_argument("mappings", nargs="*", type=parse_mapping, metavar="SRC=DEST", help="Source file and its destination")
    build.add_argument("--config", help="Configuration file (default: importjs.json)")
    build.add_argument("--no-write", action="store_true", help="Resolve imports without writing destination files")

    subparsers.add_parser("resolve", help="Print a file with its imports replaced").add_argument("filename")

    args = parser.parse_args()

    if args.command == "build": cmd_build(args)
    elif args.command == "resolve": cmd_resolve(args)
    else: parser.print_help()

if __name__ == "__main__":
    main()
