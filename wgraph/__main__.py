"""Allow running wgraph as a module: ``python -m wgraph``."""

from wgraph.cli import main

if __name__ == "__main__":
    main()
