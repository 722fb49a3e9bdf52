from typing import Dict, List, Literal


class DisjointSet:
    """
    A Union-Find (Disjoint Set) structure over the integers ``0 .. n-1``.

    Used by Kruskal's algorithm to tell whether two vertices already lie in
    the same tree of the growing spanning forest.
    """

    def __init__(
        self,
        num_nodes: int,
        union_policy: Literal["size", "depth"] = "size",
    ):
        """
        Initialize the structure with every node in its own singleton set.

        Parameters
        ----------
        num_nodes : int
            The number of nodes.
        union_policy : {"size", "depth"}, optional
            ``"size"`` compresses paths during ``find`` and hangs the smaller
            set under the root of the larger one. ``"depth"`` never compresses;
            on each union it measures how deep the two argument nodes sit in
            their trees and hangs the root of the shallower node under the
            deeper node itself. Default is "size".
        """

        if num_nodes < 0:
            raise ValueError("num_nodes must be ≥ 0")
        if union_policy not in {"size", "depth"}:
            raise ValueError("union_policy must be 'size' or 'depth'")

        self.union_policy = union_policy
        self.num_nodes = num_nodes
        self.parent = list(range(num_nodes))
        self.size = [1] * num_nodes  # only meaningful at roots
        self._num_sets = num_nodes

    def _check_node(self, node: int) -> None:
        if node < 0 or node >= self.num_nodes:
            raise IndexError(f"No such node: {node}")

    def find(self, node: int) -> int:
        """
        Walk parent links from ``node`` up to the root of its tree.

        Under the ``"size"`` policy every node passed on the way is re-pointed
        at its grandparent (path halving), so later walks are shorter. Under
        ``"depth"`` the walk is read-only and the tree shape is preserved for
        the next depth measurement.

        Parameters
        ----------
        node : int
            Start of the walk.

        Returns
        -------
        int
            The root, i.e. the first node that is its own parent.
        """

        self._check_node(node)
        parent = self.parent
        if self.union_policy == "depth":
            while parent[node] != node:
                node = parent[node]
            return node

        # path halving
        while parent[node] != node:
            parent[node] = parent[parent[node]]
            node = parent[node]
        return node

    def depth(self, node: int) -> int:
        """
        Count the parent links between a node and its root.

        Parameters
        ----------
        node : int
            The node to measure.

        Returns
        -------
        int
            0 for a root.
        """

        self._check_node(node)
        d = 0
        while self.parent[node] != node:
            node = self.parent[node]
            d += 1
        return d

    def union(self, node1: int, node2: int) -> bool:
        """
        Merge the sets containing node1 and node2.

        Parameters
        ----------
        node1 : int
            First node.
        node2 : int
            Second node.

        Returns
        -------
        bool
            True if two sets were merged, False if the nodes were already in
            the same set.
        """

        root1 = self.find(node1)
        root2 = self.find(node2)
        if root1 == root2:
            return False

        if self.union_policy == "depth":
            if self.depth(node1) > self.depth(node2):
                self.parent[root2] = node1
                self.size[root1] += self.size[root2]
            else:
                self.parent[root1] = node2
                self.size[root2] += self.size[root1]
        else:
            # Attach smaller set under the larger set's root
            if self.size[root1] < self.size[root2]:
                root1, root2 = root2, root1
            self.parent[root2] = root1
            self.size[root1] += self.size[root2]

        self._num_sets -= 1
        return True

    def is_connected(self, node1: int, node2: int) -> bool:
        """
        Tell whether a union of the two nodes would be a no-op.

        Both walks go through :meth:`find`, so under ``"size"`` this call also
        shortens the paths it follows.

        Parameters
        ----------
        node1, node2 : int
            The nodes to compare.

        Returns
        -------
        bool
            True when both walks end at the same root.
        """

        return self.find(node1) == self.find(node2)

    def component_size(self, node: int) -> int:
        """Return the number of nodes in the set containing ``node``."""
        return self.size[self.find(node)]

    def groups(self) -> Dict[int, List[int]]:
        """
        Group the nodes by set.

        Returns
        -------
        Dict[int, List[int]]
            Maps each root to the ascending list of nodes in its set.
        """

        out: Dict[int, List[int]] = {}
        for i in range(self.num_nodes):
            out.setdefault(self.find(i), []).append(i)
        return out

    def __len__(self) -> int:
        """
        Number of disjoint sets, read from a counter that starts at
        ``num_nodes`` and drops by one on every merging :meth:`union`.
        """

        return self._num_sets
