"""Extraction of query blocks embedded in Markdown documents."""

import re

from ptaquery.domain.entities import QueryBlock

DEFAULT_LANGUAGE = "pta"

_FENCE_RE = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})\s*(?P<info>[^\s`]*)")


def extract_query_blocks(markdown: str, language: str = DEFAULT_LANGUAGE) -> list[QueryBlock]:
    """Find fenced code blocks tagged with ``language``.

    Args:
        markdown: Document text
        language: Info string that marks a query block

    Returns:
        Blocks in document order, with stripped content and the 1-based line
        of the opening fence. An unterminated block runs to end of document.
    """
    blocks: list[QueryBlock] = []
    lines = markdown.splitlines()
    i = 0

    while i < len(lines):
        match = _FENCE_RE.match(lines[i])
        if match is None:
            i += 1
            continue

        fence = match.group("fence")
        start = i
        body: list[str] = []
        i += 1
        while i < len(lines):
            closing = lines[i].strip()
            if closing.startswith(fence[0] * len(fence)) and not closing.strip(fence[0]):
                break
            body.append(lines[i])
            i += 1
        i += 1

        if match.group("info").lower() == language.lower():
            blocks.append(QueryBlock(source="\n".join(body).strip(), line=start + 1))

    return blocks
