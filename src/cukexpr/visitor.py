from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

from .node import Node, NodeType

_VRT = TypeVar("_VRT")


class ASTVisitor(Generic[_VRT], ABC):
    """A visitor generic base class for a cucumber expression syntax tree.

    Subclasses must implement a generic_visit method that will be called
    when no matching visit method is found.

    Subclasses can also implement visit_{node type name in lower case} methods,
    e.g. `visit_optional_node(self, node: Node)`, that will be called when a node
    of the matching type is visited.

    >>> class TextCollector(ASTVisitor[str]):
    ...     def visit_text_node(self, node: Node) -> str:
    ...         return node.get_text()
    ...     def generic_visit(self, node: Node) -> str:
    ...         return "".join(self.visit(child) for child in node.children)

    The type parameter is the return type of all visit methods.

    """

    def __init__(self) -> None:
        # Per-instance cache of bound methods
        self.__dispatch_cache__: dict[NodeType, Callable[[Node], _VRT]] = {}

    def _dispatch_visit_method(self, node: Node) -> Callable[[Node], _VRT]:
        """Returns a visit method for a given node, based on its type."""
        visitor_bound_method = self.__dispatch_cache__.get(node.type)

        if visitor_bound_method is not None:
            return visitor_bound_method

        visitor_bound_method = getattr(self, f"visit_{node.type.name.lower()}", self.generic_visit)
        self.__dispatch_cache__[node.type] = visitor_bound_method

        return visitor_bound_method

    @abstractmethod
    def generic_visit(self, node: Node) -> _VRT:
        raise NotImplementedError

    def visit(self, node: Node) -> _VRT:
        """Visits the given node by finding and calling a matching visitor method or generic_visit
        if it doesn't exist.

        Args:
            node (Node): The node to visit.

        Returns:
            VisitorReturnType: The return value of the visitor's visit method

        """
        return self._dispatch_visit_method(node)(node)
