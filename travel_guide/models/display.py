"""
Display tree models produced by the Markdown renderer.
"""
from pydantic import BaseModel, Field
from typing import Annotated, Literal, Union


class TextNode(BaseModel):
    kind: Literal["text"] = "text"
    text: str


class LinkNode(BaseModel):
    kind: Literal["link"] = "link"
    label: str
    url: str


class LineBreakNode(BaseModel):
    kind: Literal["break"] = "break"


InlineNode = Annotated[Union[TextNode, LinkNode], Field(discriminator="kind")]


class TableNode(BaseModel):
    """A rendered table; every cell is a list of inline nodes."""
    kind: Literal["table"] = "table"
    headers: list[list[InlineNode]] = Field(default_factory=list)
    rows: list[list[list[InlineNode]]] = Field(default_factory=list)


DisplayNode = Annotated[
    Union[TextNode, LinkNode, LineBreakNode, TableNode],
    Field(discriminator="kind")
]
