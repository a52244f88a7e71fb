from npuzzle.models.board import MAX_SIZE, MIN_SIZE, Board, Direction, InvalidBoard

__all__ = ["Board", "Direction", "InvalidBoard", "MAX_SIZE", "MIN_SIZE"]
