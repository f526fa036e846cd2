"""CLI argument parser and dispatch for rankban."""

import argparse

from rankban.cli.board import board_add, board_list
from rankban.cli.card import card_add, card_list, card_move, card_remove, card_rename
from rankban.cli.compare import compare
from rankban.cli.config import config
from rankban.cli.episode import episode_delete, episode_label, episode_list, episode_save
from rankban.cli.init import init_library
from rankban.cli.trajectory import trajectory


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--repo", default=".", help="Path to git repository (default: .)")
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    common.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")

    parser = argparse.ArgumentParser(
        prog="rankban",
        description="Ranked lists with episode history, stored in git",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- init ---
    init_p = nouns.add_parser("init", help="Initialize a rankban library", parents=[common])
    init_p.add_argument("--board", default="Rankings", help="Name of the first board (default: Rankings)")
    init_p.set_defaults(func=init_library)

    # --- board ---
    board_p = nouns.add_parser("board", help="Board operations", parents=[common])
    board_verbs = board_p.add_subparsers(dest="verb")

    board_list_p = board_verbs.add_parser("list", help="List boards", parents=[common])
    board_list_p.set_defaults(func=board_list)

    board_add_p = board_verbs.add_parser("add", help="Create a board", parents=[common])
    board_add_p.add_argument("name", help="Board name")
    board_add_p.set_defaults(func=board_add)

    # board with no verb = list
    board_p.set_defaults(func=board_list)

    # --- card ---
    card_p = nouns.add_parser("card", help="Card operations", parents=[common])
    card_verbs = card_p.add_subparsers(dest="verb")

    card_list_p = card_verbs.add_parser("list", help="List cards in rank order", parents=[common])
    card_list_p.add_argument("board", help="Board ID")
    card_list_p.set_defaults(func=card_list)

    card_add_p = card_verbs.add_parser("add", help="Add a card at the bottom", parents=[common])
    card_add_p.add_argument("board", help="Board ID")
    card_add_p.add_argument("name", help="Card name")
    card_add_p.add_argument("--thumbnail", help="Thumbnail reference")
    card_add_p.add_argument("--notes", default="", help="Card notes")
    card_add_p.set_defaults(func=card_add)

    card_move_p = card_verbs.add_parser("move", help="Move a card to a new rank", parents=[common])
    card_move_p.add_argument("board", help="Board ID")
    card_move_p.add_argument("id", help="Card ID")
    card_move_p.add_argument("--position", type=int, required=True, help="New rank (1-indexed)")
    card_move_p.set_defaults(func=card_move)

    card_rename_p = card_verbs.add_parser("rename", help="Rename a card", parents=[common])
    card_rename_p.add_argument("board", help="Board ID")
    card_rename_p.add_argument("id", help="Card ID")
    card_rename_p.add_argument("name", help="New card name")
    card_rename_p.set_defaults(func=card_rename)

    card_remove_p = card_verbs.add_parser("remove", help="Remove a card", parents=[common])
    card_remove_p.add_argument("board", help="Board ID")
    card_remove_p.add_argument("id", help="Card ID")
    card_remove_p.set_defaults(func=card_remove)

    # --- episode ---
    ep_p = nouns.add_parser("episode", help="Episode operations", parents=[common])
    ep_verbs = ep_p.add_subparsers(dest="verb")

    ep_list_p = ep_verbs.add_parser("list", help="List episodes", parents=[common])
    ep_list_p.add_argument("board", help="Board ID")
    ep_list_p.set_defaults(func=episode_list)

    ep_save_p = ep_verbs.add_parser("save", help="Save the current order as an episode", parents=[common])
    ep_save_p.add_argument("board", help="Board ID")
    ep_save_p.add_argument("--label", help="Episode label (default: Episode N)")
    ep_save_p.add_argument("--notes", default="", help="Episode notes")
    ep_save_p.add_argument("--number", type=int, help="Episode number (default: next)")
    ep_save_p.set_defaults(func=episode_save)

    ep_label_p = ep_verbs.add_parser("label", help="Relabel an episode", parents=[common])
    ep_label_p.add_argument("board", help="Board ID")
    ep_label_p.add_argument("number", type=int, help="Episode number")
    ep_label_p.add_argument("label", help="New label")
    ep_label_p.add_argument("--notes", help="Replace the episode notes")
    ep_label_p.set_defaults(func=episode_label)

    ep_delete_p = ep_verbs.add_parser("delete", help="Delete an episode", parents=[common])
    ep_delete_p.add_argument("board", help="Board ID")
    ep_delete_p.add_argument("number", type=int, help="Episode number")
    ep_delete_p.set_defaults(func=episode_delete)

    # --- compare ---
    compare_p = nouns.add_parser("compare", help="Show rank movement between episodes", parents=[common])
    compare_p.add_argument("board", help="Board ID")
    compare_p.add_argument("--from", dest="from_", type=int, help="Baseline episode (default: latest)")
    compare_p.add_argument("--to", type=int, help="Episode to compare (default: current order)")
    compare_p.set_defaults(func=compare)

    # --- trajectory ---
    traj_p = nouns.add_parser("trajectory", help="Show rank history across episodes", parents=[common])
    traj_p.add_argument("board", help="Board ID")
    traj_p.add_argument("card", nargs="?", help="Card ID (default: every live card)")
    traj_p.add_argument("--all", action="store_true", help="Include cards no longer on the board")
    traj_p.set_defaults(func=trajectory)

    # --- config ---
    config_p = nouns.add_parser("config", help="Read or write settings", parents=[common])
    config_p.add_argument("key", nargs="?", help="Setting name")
    config_p.add_argument("value", nargs="?", help="New value")
    config_p.set_defaults(func=config)

    return parser
