"""Maze generation algorithms.

- BranchingPathGenerator: weighted random path grown into a branching maze
- SymmetryTransformGenerator: wraps another generator and applies a random
  rotation/reflection to its output
- StaticMazeGenerator: a fixed, hand-authored layout
"""

from .base import MazeGenerator
from .branching import BranchingPathGenerator
from .static import StaticMazeGenerator
from .symmetry import RigidMotion, Symmetry, SymmetryTransformGenerator

__all__ = [
    "BranchingPathGenerator",
    "MazeGenerator",
    "RigidMotion",
    "StaticMazeGenerator",
    "Symmetry",
    "SymmetryTransformGenerator",
]
