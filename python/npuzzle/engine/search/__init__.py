from npuzzle.engine.search.frontier import Frontier, FrontierEntry
from npuzzle.engine.search.puzzle import Puzzle

__all__ = ["Frontier", "FrontierEntry", "Puzzle"]
