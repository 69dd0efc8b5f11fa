"""Visual scenes: trees of transformed nodes, and the scene that picks one."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from .assets import Asset
from .instances import InstanceVisualScene, NodeItem

__all__ = ["NodeType", "Node", "VisualScene", "Scene"]

Matrix4 = tuple[tuple[float, float, float, float], ...]

_IDENTITY: Matrix4 = tuple(
    tuple(1.0 if row == col else 0.0 for col in range(4)) for row in range(4)
)


def _as_matrix(rows) -> Matrix4:
    matrix = tuple(tuple(float(value) for value in row) for row in rows)
    if len(matrix) != 4 or any(len(row) != 4 for row in matrix):
        raise ValueError("a 4x4 matrix needs 4 rows of 4 values")
    return matrix


class NodeType(enum.Enum):
    """Kind of scene node."""

    NODE = "NODE"
    JOINT = "JOINT"


@dataclass(eq=False)
class Node:
    """A scene node with a transform, an optional item and child nodes."""

    id: str = ""
    sid: str = ""
    type: NodeType = NodeType.NODE
    item: NodeItem | None = None
    transform: Matrix4 = _IDENTITY
    children: list[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.transform = _as_matrix(self.transform)

    def add_child(self, node: Node) -> None:
        """Append a child node."""
        self.children.append(node)

    def depth_first(self, visitor: Callable[[Node], bool]) -> bool:
        """Visit nodes in pre-order until the visitor returns true; report whether it did."""
        if visitor(self):
            return True
        return any(child.depth_first(visitor) for child in self.children)

    def walk(self) -> Iterator[Node]:
        """Yield this node and its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(eq=False)
class VisualScene(Asset):
    """A visual scene: an unnamed root node holding the top-level nodes."""

    root: Node = field(default_factory=Node)

    def resolve(self, url: str) -> Node | None:
        """Find the first node, in pre-order, whose id the URL ``#id`` names."""
        node_id = url[1:]
        return next((node for node in self.root.walk() if node.id == node_id), None)


@dataclass
class Scene:
    """The document's scene: which visual scene is shown."""

    instance_visual_scene: InstanceVisualScene