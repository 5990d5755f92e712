"""Self-balancing binary search tree of water treatment plants keyed by identifier."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

MAX_ID_LEN = 32


@dataclass(eq=False)
class PlantNode:
    """A plant with its accumulated volumes, stored as an AVL tree node."""

    id: str
    max_capacity: int = 0
    total_captured: int = 0
    real_treated: int = 0
    left: Optional[PlantNode] = field(default=None, repr=False)
    right: Optional[PlantNode] = field(default=None, repr=False)
    height: int = 1

    def __post_init__(self) -> None:
        self.id = self.id[: MAX_ID_LEN - 1]


def node_height(node: Optional[PlantNode]) -> int:
    """Height of a subtree; an empty subtree has height 0."""
    return 0 if node is None else node.height


def node_balance(node: Optional[PlantNode]) -> int:
    """Right height minus left height; negative means left-heavy."""
    if node is None:
        return 0
    return node_height(node.right) - node_height(node.left)


def _refresh_height(node: PlantNode) -> None:
    node.height = 1 + max(node_height(node.left), node_height(node.right))


def rotate_right(node: Optional[PlantNode]) -> Optional[PlantNode]:
    """Rotate a subtree right; it is returned unchanged if it has no left child."""
    if node is None or node.left is None:
        return node
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _refresh_height(node)
    _refresh_height(pivot)
    return pivot


def rotate_left(node: Optional[PlantNode]) -> Optional[PlantNode]:
    """Rotate a subtree left; it is returned unchanged if it has no right child."""
    if node is None or node.right is None:
        return node
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _refresh_height(node)
    _refresh_height(pivot)
    return pivot


def search_plant(node: Optional[PlantNode], plant_id: str) -> Optional[PlantNode]:
    """Find the node holding ``plant_id`` in a subtree, or None."""
    while node is not None and plant_id != node.id:
        node = node.left if plant_id < node.id else node.right
    return node


def insert_plant(node: Optional[PlantNode], plant_id: str) -> PlantNode:
    """Insert ``plant_id`` if absent and return the new, rebalanced subtree root."""
    if node is None:
        return PlantNode(plant_id)

    if plant_id < node.id:
        node.left = insert_plant(node.left, plant_id)
    elif plant_id > node.id:
        node.right = insert_plant(node.right, plant_id)
    else:
        return node

    _refresh_height(node)
    balance = node_balance(node)

    if balance < -1:
        if node_balance(node.left) > 0:
            node.left = rotate_left(node.left)
        return rotate_right(node)
    if balance > 1:
        if node_balance(node.right) < 0:
            node.right = rotate_right(node.right)
        return rotate_left(node)
    return node


class PlantTree:
    """An AVL tree of plants, iterated in ascending identifier order."""

    def __init__(self) -> None:
        self.root: Optional[PlantNode] = None
        self._size = 0

    def insert(self, plant_id: str) -> PlantNode:
        """Return the node for ``plant_id``, creating it if needed."""
        key = plant_id[: MAX_ID_LEN - 1]
        found = search_plant(self.root, key)
        if found is not None:
            return found
        self.root = insert_plant(self.root, key)
        self._size += 1
        node = search_plant(self.root, key)
        assert node is not None
        return node

    def search(self, plant_id: str) -> Optional[PlantNode]:
        """Return the node for ``plant_id`` or None."""
        return search_plant(self.root, plant_id)

    def height(self) -> int:
        """Height of the whole tree."""
        return node_height(self.root)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[PlantNode]:
        stack: list[PlantNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def descending(self) -> Iterator[PlantNode]:
        """Yield the nodes in descending identifier order."""
        stack: list[PlantNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right
            node = stack.pop()
            yield node
            node = node.left