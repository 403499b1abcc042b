from __future__ import annotations

from typing import Final

from rps_rules import GameRules

CORNER: Final[str] = "Moves / Results"
LABELS: Final[dict[str, str]] = {"win": "Win", "lose": "Lose", "draw": "Draw"}


def format_help_table(rules: GameRules) -> str:
    moves = rules.all_moves()
    first_width = max(len(CORNER), *(len(m) for m in moves)) + 2
    cell_width = max(max(len(label) for label in LABELS.values()), *(len(m) for m in moves)) + 2

    lines: list[str] = ["Each row shows the result of that move played against the column move."]
    header = f"{CORNER:{first_width}}" + "".join(f"{m:{cell_width}}" for m in moves)
    lines.append(header.rstrip())
    lines.append("-" * len(header.rstrip()))
    for move, row in zip(moves, rules.outcome_matrix()):
        line = f"{move:{first_width}}" + "".join(f"{LABELS[outcome]:{cell_width}}" for outcome in row)
        lines.append(line.rstrip())
    return "\n".join(lines)
