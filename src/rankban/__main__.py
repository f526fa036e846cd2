"""Entry point for rankban CLI."""

import sys
from pathlib import Path

NOUNS = {"init", "board", "card", "episode", "compare", "trajectory", "config"}


def main():
    # No subcommand or non-noun argument = TUI mode
    if len(sys.argv) < 2 or (sys.argv[1] not in NOUNS and not sys.argv[1].startswith("-")):
        from rankban.ui import RankbanApp

        path = sys.argv[1] if len(sys.argv) > 1 else "."
        app = RankbanApp(Path(path).resolve())
        app.run()
        return

    from rankban.cli import build_parser
    from rankban.cli._common import configure_logging

    parser = build_parser()
    args = parser.parse_args()
    configure_logging(args.verbose)

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
