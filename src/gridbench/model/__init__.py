"""
The MODEL layer holds the grid state and its mutation rules.
It has no knowledge of widgets; change notification goes through Qt signals.
"""
from gridbench.model.grid import CellModel, GridModel, RowModel

__all__ = ["CellModel", "GridModel", "RowModel"]
