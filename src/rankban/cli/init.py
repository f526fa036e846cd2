"""Handler for 'rankban init'."""

from pathlib import Path

from rankban.cli._common import output_json
from rankban.git import branch_exists, init_repo, is_git_repo
from rankban.store import GitStore


def init_library(args) -> int:
    """Initialize a rankban library in the repository."""
    repo_path = Path(args.repo).resolve()

    if not is_git_repo(repo_path):
        init_repo(repo_path)

    if branch_exists(repo_path):
        store = GitStore.open(str(repo_path))
        created = False
    else:
        store = GitStore.create(str(repo_path), board_name=args.board)
        created = True

    boards = [b.name for b in store.library.boards.values()]
    if args.json:
        output_json({"repo_path": str(repo_path), "boards": boards, "created": created})
    elif created:
        print(f"Initialized rankban at {repo_path}")
    else:
        print(f"rankban already initialized at {repo_path}")
    return 0
