"""Handler for 'rankban config'."""

from pathlib import Path

from rankban.cli._common import error, output_json, output_result
from rankban.git import RANKBAN_DEFAULTS, is_git_repo, read_config, write_config_key


def config(args) -> int:
    """Show all settings, show one, or set one."""
    repo_path = Path(args.repo).resolve()
    if not is_git_repo(repo_path):
        error(f"{repo_path} is not a git repository.", args.json)

    values = read_config(repo_path)

    if args.key is None:
        if args.json:
            output_json(values)
        else:
            for key in RANKBAN_DEFAULTS:
                print(f"{key} = {values[key.replace('-', '_')]}")
        return 0

    key = args.key.replace("_", "-")
    if key not in RANKBAN_DEFAULTS:
        error(f"Unknown setting '{args.key}'. Known: {', '.join(RANKBAN_DEFAULTS)}", args.json)

    if args.value is None:
        value = values[key.replace("-", "_")]
        output_result({key: value}, str(value), args.json)
        return 0

    if isinstance(RANKBAN_DEFAULTS[key], int):
        try:
            int(args.value)
        except ValueError:
            error(f"'{key}' must be a whole number.", args.json)

    write_config_key(repo_path, key, args.value)
    output_result({key: args.value}, f"{key} = {args.value}", args.json)
    return 0
