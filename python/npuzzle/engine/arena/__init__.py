from npuzzle.engine.arena.arena import NodeArena, SearchNode

__all__ = ["NodeArena", "SearchNode"]
