"""
Disjoint-set forest over the live cells of a grid.

One node per live cell, addressed by the cell's grid index. Each node keeps
its parent index (None for a root) and the indices of its children. Two cells
are in the same tree iff walking parent pointers from each reaches the same
root. The forest belongs to a single generation call and is dropped with it.
"""

from __future__ import annotations

from gridmaze.geometry.grid import Cell, MazeGrid


class CellTree:
    """Union-find over grid cells, without path compression."""

    def __init__(self, grid: MazeGrid):
        self._parent: dict[int, int | None] = {}
        self._children: dict[int, list[int]] = {}
        self._size: dict[int, int] = {}
        for cell in grid.cells():
            self._parent[cell.index] = None
            self._children[cell.index] = []
            self._size[cell.index] = 1

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, cell: object) -> bool:
        return isinstance(cell, Cell) and cell.index in self._parent

    def find(self, cell: Cell) -> int:
        """Index of the root of the tree containing ``cell``."""
        node = cell.index
        parent = self._parent[node]
        while parent is not None:
            node = parent
            parent = self._parent[node]
        return node

    def parent(self, cell: Cell) -> int | None:
        return self._parent[cell.index]

    def children(self, cell: Cell) -> list[int]:
        return list(self._children[cell.index])

    def same_tree(self, cell1: Cell, cell2: Cell) -> bool:
        return self.find(cell1) == self.find(cell2)

    def union(self, cell1: Cell, cell2: Cell) -> bool:
        """
        Attach the root of ``cell2``'s tree under the root of ``cell1``'s tree.

        Returns False (and changes nothing) when both are already in the
        same tree.
        """
        root1 = self.find(cell1)
        root2 = self.find(cell2)
        if root1 == root2:
            return False
        self._parent[root2] = root1
        self._children[root1].append(root2)
        self._size[root1] += self._size.pop(root2)
        return True

    def tree_size(self, cell: Cell) -> int:
        """Number of cells in the tree containing ``cell``."""
        return self._size[self.find(cell)]

    def count_nodes(self, root: int) -> int:
        """Size of the subtree rooted at node ``root``, root included."""
        count = 0
        stack = [root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(self._children[node])
        return count

    def contains_cell(self, root: int, cell: Cell) -> bool:
        """Whether ``cell`` lies anywhere in the subtree rooted at ``root``."""
        stack = [root]
        while stack:
            node = stack.pop()
            if node == cell.index:
                return True
            stack.extend(self._children[node])
        return False

    def roots(self) -> list[int]:
        return [node for node, parent in self._parent.items() if parent is None]
