from ..grid import BoardView


def status_text(view: BoardView, moves: int) -> str:
    """
    Single status line for the runner, e.g. "POS 004,002  MOVES 0012".
    Appends "ESCAPED" once the exit has been reached.
    """
    if moves < 0:
        raise ValueError("moves must be non-negative")
    text = f"POS {view.player.x:03d},{view.player.y:03d}  MOVES {moves % 10000:04d}"
    if view.done:
        text += "  ESCAPED"
    return text
