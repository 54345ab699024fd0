"""
Markdown-to-Display Renderer.
Turns section text (links, one table, line breaks) into a display tree.
Read-only: nothing here is ever written back.
"""
import html
import re

from .flight_table import find_table, split_row
from ..models.display import LineBreakNode, LinkNode, TableNode, TextNode

_LINK = re.compile(r'\[([^\]]+)\]\(([^)]+)\)')


def _inline(text: str, line_breaks: bool = True) -> list:
    """Text and link nodes for a run of text, with optional line break nodes."""
    nodes = []

    def add_text(chunk: str):
        if not line_breaks:
            if chunk:
                nodes.append(TextNode(text=chunk))
            return
        parts = chunk.split("\n")
        for i, part in enumerate(parts):
            if i:
                nodes.append(LineBreakNode())
            if part:
                nodes.append(TextNode(text=part))

    pos = 0
    for match in _LINK.finditer(text):
        add_text(text[pos:match.start()])
        nodes.append(LinkNode(label=match.group(1), url=match.group(2)))
        pos = match.end()
    add_text(text[pos:])
    return nodes


def _strip_one(text: str, newline_at_end: bool) -> str:
    """Remove one line terminator next to a table block."""
    for terminator in ("\r\n", "\n"):
        if newline_at_end and text.endswith(terminator):
            return text[:-len(terminator)]
        if not newline_at_end and text.startswith(terminator):
            return text[len(terminator):]
    return text


def render_markdown(text: str) -> list:
    """
    Render section text as display nodes.

    Only the first table is turned into a table node; any later table stays
    as plain text.
    """
    text = text or ""
    table = find_table(text)
    if table is None:
        return _inline(text)

    before = _strip_one(text[:table.start], newline_at_end=True)
    after = _strip_one(text[table.end:], newline_at_end=False)

    rows = [split_row(line) for line in table.body]
    node = TableNode(
        headers=[_inline(cell, line_breaks=False) for cell in split_row(table.header)],
        rows=[
            [_inline(cell, line_breaks=False) for cell in row]
            for row in rows
            if row
        ]
    )
    return _inline(before) + [node] + _inline(after)


def render_html(nodes: list) -> str:
    """Serialize display nodes to HTML; links open in a new tab."""
    out = []
    for node in nodes:
        if isinstance(node, TextNode):
            out.append(html.escape(node.text))
        elif isinstance(node, LinkNode):
            out.append(
                f'<a href="{html.escape(node.url)}" target="_blank" '
                f'rel="noopener noreferrer">{html.escape(node.label)}</a>'
            )
        elif isinstance(node, LineBreakNode):
            out.append("<br/>")
        elif isinstance(node, TableNode):
            head = "".join(f"<th>{render_html(cell)}</th>" for cell in node.headers)
            body = "".join(
                "<tr>" + "".join(f"<td>{render_html(cell)}</td>" for cell in row) + "</tr>"
                for row in node.rows
            )
            out.append(f"<table><thead><tr>{head}</tr></thead><tbody>{body}</tbody></table>")
    return "".join(out)
