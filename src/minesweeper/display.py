"""
Text helpers for showing a game in a terminal.
"""
from .engine import GameEngine


def format_counter(value: int) -> str:
    """
    Format a value for a three-character counter display.

    Positive values are zero-padded and capped at 999; negative values
    keep a leading minus with two digits and floor at -99.

    Examples:
        7 -> "007", 1234 -> "999", -3 -> "-03", -150 -> "-99"
    """
    if value >= 0:
        return f"{min(value, 999):03d}"
    return f"-{min(-value, 99):02d}"


def render_board(engine: GameEngine) -> str:
    """Render board as ASCII string with row and column indices."""
    obs = engine.get_observation()
    width = engine.config.width
    lines = ["    " + " ".join(f"{col % 10}" for col in range(width))]

    for row in range(engine.config.height):
        row_str = ""
        for col in range(width):
            val = obs[row, col]
            if val == -1:
                row_str += "."
            elif val == -2:
                row_str += "F"
            elif val == 9:
                row_str += "*"
            elif val == 0:
                row_str += " "
            else:
                row_str += str(val)
            row_str += " "
        lines.append(f"{row:>3} {row_str.rstrip()}")

    return "\n".join(lines)


def status_line(engine: GameEngine) -> str:
    """Summarize mines remaining, progress and state on one line."""
    return (
        f"Mines: {format_counter(engine.mines_remaining)} | "
        f"Opened: {engine.opened_count}/{engine.target_count} | "
        f"State: {engine.state.name}"
    )
