"""Configuration defaults for wgraph algorithms."""

from dataclasses import dataclass


@dataclass
class GraphEngineConfig:
    """Defaults shared by the shortest-path and spanning-forest engines."""

    # Maximum absolute difference between w(i, j) and w(j, i) for a symmetric input
    symmetry_tolerance: float = 1e-6

    # Source vertex used by the text harness when none is given
    default_source: int = 0

    # Stop Bellman-Ford relaxation once a full pass changes nothing
    early_exit: bool = True

    def is_symmetric_pair(self, forward: float, backward: float) -> bool:
        """Return True if two directed weights describe the same undirected edge."""
        if forward == backward:
            # Covers matching infinities, where the difference is NaN
            return True
        return abs(forward - backward) <= self.symmetry_tolerance


# Global configuration instance
ENGINE_CONFIG = GraphEngineConfig()
