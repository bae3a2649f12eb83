"""GUI package for the kinetics explorer."""

from kinexplorer.gui.session import ExplorerSession

__all__ = ["ExplorerSession"]
