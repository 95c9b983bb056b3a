from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, Sequence

from rich.markup import escape
from rich.tree import Tree

from .error import InvalidNodeError
from .serialize import DataClassSerializeMixin


@enum.unique
class NodeType(enum.Enum):
    TEXT_NODE = "TEXT_NODE"
    OPTIONAL_NODE = "OPTIONAL_NODE"
    ALTERNATION_NODE = "ALTERNATION_NODE"
    ALTERNATIVE_NODE = "ALTERNATIVE_NODE"
    PARAMETER_NODE = "PARAMETER_NODE"
    EXPRESSION_NODE = "EXPRESSION_NODE"

    @property
    def is_leaf(self) -> bool:
        return self is NodeType.TEXT_NODE


@dataclass(frozen=True, slots=True)
class Node(DataClassSerializeMixin):
    """A node of a parsed cucumber expression.

    Text nodes are leaves and hold the literal text in `token`. All other node
    types hold a (possibly empty) tuple of children in `nodes`.

    `start` and `end` are zero-based, end-exclusive offsets into the original
    expression. They are part of equality and hashing, so two trees of the same
    shape parsed from different sources are not equal.

    Raises:
        InvalidNodeError: if fields do not match the node type or offsets are invalid

    """

    type: NodeType
    start: int
    end: int
    nodes: tuple[Node, ...] | None = None
    token: str | None = None

    def __post_init__(self) -> None:
        if self.start < 0 or self.start > self.end:
            raise InvalidNodeError(
                f"Invalid span [{self.start}, {self.end}) for a {self.type.name}"
            )

        if self.type.is_leaf:
            if self.token is None or self.nodes is not None:
                raise InvalidNodeError(f"{self.type.name} must have a token and no child nodes")
            return

        if self.nodes is None or self.token is not None:
            raise InvalidNodeError(f"{self.type.name} must have child nodes and no token")

        if not isinstance(self.nodes, tuple):
            # Frozen, hence the workaround
            object.__setattr__(self, "nodes", tuple(self.nodes))

    @classmethod
    def text(cls, start: int, end: int, token: str) -> Node:
        """Create a text (leaf) node."""
        return cls(NodeType.TEXT_NODE, start, end, token=token)

    @classmethod
    def composite(cls, type: NodeType, start: int, end: int, nodes: Sequence[Node] = ()) -> Node:
        """Create a composite node of the given type."""
        return cls(type, start, end, nodes=tuple(nodes))

    @property
    def children(self) -> tuple[Node, ...]:
        """Child nodes, empty for text nodes."""
        return self.nodes or ()

    def get_text(self) -> str:
        """Returns the literal text this node matches.

        For text nodes this is the token itself, for all other nodes it is
        the concatenation of the children's text. Escaping backslashes are
        not part of the text.

        """
        if self.token is not None:
            return self.token

        return "".join(node.get_text() for node in self.children)

    def dfs(self) -> Iterator[Node]:
        """Yields all descendants of this node in depth-first pre-order.

        The node itself is not included.

        """
        stack: Deque[Node] = deque(reversed(self.children))

        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def __rich__(self, parent: Tree | None = None) -> Tree:
        """Returns a tree widget for the 'rich' library."""
        name = f"[bold green]{self.type.name}[/bold green] {escape(f'[{self.start}, {self.end})')}"

        if self.token is not None:
            name += f" [yellow]{escape(repr(self.token))}[/yellow]"

        if parent:
            tree = parent.add(name)
        else:
            tree = Tree(name)

        for child in self.children:
            child.__rich__(tree)

        return tree
