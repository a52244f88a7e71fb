from npuzzle.io.reader import format_board, parse_board, parse_grid, read_board, write_board

__all__ = ["format_board", "parse_board", "parse_grid", "read_board", "write_board"]
