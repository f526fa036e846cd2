"""Parse markdown records with YAML front-matter.

Every record on the branch (library index, board, card, episode) is a small
markdown document: optional front-matter, a "# Title" line, then free text.
"""

import re

import yaml

_FRONT_MATTER = re.compile(r"^---\n(.*?)\n---\n?", re.DOTALL)
_H1 = re.compile(r"^# ", re.MULTILINE)


def _extract_front_matter(text: str) -> tuple[str, dict]:
    """Split text into (remaining_text, meta)."""
    if not text.startswith("---"):
        return text, {}

    match = _FRONT_MATTER.match(text)
    if not match:
        return text, {}

    try:
        meta = yaml.safe_load(match.group(1)) or {}
    except yaml.YAMLError:
        meta = {}
    if not isinstance(meta, dict):
        meta = {}

    return text[match.end() :], meta


def parse_document(text: str, fallback_title: str = "") -> tuple[str, str, dict]:
    """Parse a record into (title, body, meta).

    The first "# " line is the title; everything after it is the body.
    Text before the heading is kept as body too.
    """
    text, meta = _extract_front_matter(text)

    title = ""
    before: list[str] = []
    after: list[str] = []
    for line in text.split("\n"):
        if not title and line.startswith("# "):
            title = line[2:].strip()
            continue
        (after if title else before).append(line)

    body = "\n".join(before + after).strip()
    return title or fallback_title, body, meta


def _demote_title_lines(body: str) -> str:
    """Turn stray "# " lines in a body into "## " so they don't become titles."""
    return _H1.sub("## ", body)


def serialize_document(title: str, body: str = "", meta: dict | None = None) -> str:
    """Serialize a record back to markdown."""
    parts: list[str] = []

    if meta:
        parts.append("---")
        parts.append(yaml.safe_dump(meta, default_flow_style=False, sort_keys=False, allow_unicode=True).rstrip())
        parts.append("---")
        parts.append("")

    parts.append(f"# {title}")
    parts.append("")

    if body:
        parts.append(_demote_title_lines(body.strip()))
        parts.append("")

    return "\n".join(parts).rstrip() + "\n"
