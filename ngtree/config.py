"""Configuration classes for ngtree components."""

from dataclasses import dataclass

#: MST algorithms accepted by ``networkx.minimum_spanning_edges``.
MST_ALGORITHMS = ("kruskal", "prim", "boruvka")


@dataclass
class TreeEnumerationConfig:
    """Configuration for spanning-tree enumeration."""

    # Edge attribute holding the numeric weight
    weight_attr: str = "weight"

    # Algorithm used to build the base spanning tree
    mst_algorithm: str = "kruskal"

    def validate(self) -> None:
        """Check that the configured values are usable.

        Raises:
            ValueError: If the weight attribute is empty or the MST algorithm
                is not supported.
        """
        if not self.weight_attr:
            raise ValueError("weight_attr must be a non-empty string")
        if self.mst_algorithm not in MST_ALGORITHMS:
            valid = ", ".join(MST_ALGORITHMS)
            raise ValueError(
                f"Invalid mst_algorithm '{self.mst_algorithm}'. Valid values are: {valid}"
            )


# Global configuration instance
TREE_CONFIG = TreeEnumerationConfig()
