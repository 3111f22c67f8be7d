"""
Text rendering for the Minesweeper board.

Produces the terminal view of a board: a grid with 1-based row and
column labels, optionally coloured with ANSI escape codes.
"""
from .board import Board, GameState


# ============================================================================
# Constants
# ============================================================================

HIDDEN = "."
MINE = "*"
EMPTY = " "

ANSI_RESET = "\033[0m"
ANSI_COLUMN = "\033[31m"
ANSI_ROW = "\033[34m"
ANSI_MINE = "\033[91m"
ANSI_LOSE = "\033[30;41m"
ANSI_WIN = "\033[30;46m"
ANSI_CLEAR = "\033[2J\033[H"

NUMBER_COLOURS = {
    1: "\033[94m",
    2: "\033[32m",
    3: "\033[91m",
    4: "\033[35m",
}
DEFAULT_NUMBER_COLOUR = "\033[33m"

LOSE_MESSAGE = "  YOU LOSE!!  "
WIN_MESSAGE = "  All mines safely located! YOU WIN!!  "


def paint(text: str, code: str, color: bool = True) -> str:
    """Wrap text in an ANSI colour code."""
    if not color:
        return text
    return f"{code}{text}{ANSI_RESET}"


def _symbol(value: int, color: bool) -> str:
    """Map an observation value to its displayed symbol."""
    if value == -1:
        return HIDDEN
    if value == 9:
        return paint(MINE, ANSI_MINE, color)
    if value == 0:
        return EMPTY
    return paint(str(value), NUMBER_COLOURS.get(value, DEFAULT_NUMBER_COLOUR), color)


# ============================================================================
# Board Rendering
# ============================================================================

def format_board(
    board: Board, reveal_mines: bool = False, color: bool = True
) -> str:
    """
    Render the board as a multi-line string.

    Args:
        board: Board to render.
        reveal_mines: If True, show every mine whether revealed or not.
        color: If True, add ANSI colour codes.

    Returns:
        Header line of column numbers followed by one line per row.
    """
    obs = board.get_observation()
    if reveal_mines:
        for row, col in board.mine_positions():
            obs[row, col] = 9

    width = len(str(board.size))

    def cell(value: int) -> str:
        # Pad before colouring so escape codes do not skew alignment.
        symbol = _symbol(int(value), color=False)
        return " " * (width - len(symbol)) + _symbol(int(value), color)

    header = " ".join(
        paint(f"{col + 1:>{width}}", ANSI_COLUMN, color)
        for col in range(board.size)
    )
    lines = [" " * width + " " + header]
    for row in range(board.size):
        label = paint(f"{row + 1:>{width}}", ANSI_ROW, color)
        lines.append(label + " " + " ".join(cell(value) for value in obs[row]))

    return "\n".join(lines)


def format_banner(state: GameState, color: bool = True) -> str:
    """Get the end-of-game banner, or an empty string while playing."""
    if state == GameState.LOST:
        return paint(LOSE_MESSAGE, ANSI_LOSE, color)
    if state == GameState.WON:
        return paint(WIN_MESSAGE, ANSI_WIN, color)
    return ""


def format_progress(revealed: int, to_reveal: int) -> str:
    return f"Revealed {revealed} out of {to_reveal} so far"
