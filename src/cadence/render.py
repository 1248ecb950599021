"""Terminal rendering of consistency graphs."""

import click

from .core.agenda import AgendaRow
from .core.graph import Cell, Glyph
from .core.status import Face, Status

# Present faces use the plain colour, forecast (future) faces the bright one.
STATUS_COLORS = {
    Status.CLEAR: "blue",
    Status.READY: "green",
    Status.ALERT: "yellow",
    Status.OVERDUE: "red",
}


def face_style(face: Face) -> dict:
    """click.style() keyword arguments for a face."""
    color = STATUS_COLORS[face.status]
    if face.future:
        return {"bg": f"bright_{color}", "fg": "black"}
    return {"bg": color, "fg": "white", "bold": True}


def cell_char(cell: Cell, completed_glyph: str = "*", today_glyph: str = "!") -> str:
    if cell.glyph is Glyph.DONE:
        return completed_glyph
    if cell.glyph is Glyph.TODAY:
        return today_glyph
    return " "


def render_graph(
    cells: list[Cell],
    completed_glyph: str = "*",
    today_glyph: str = "!",
    color: bool = True,
) -> str:
    """Render cells as one line of text, coloured by face unless color is False."""
    chars = []
    for cell in cells:
        char = cell_char(cell, completed_glyph, today_glyph)
        if color:
            char = click.style(char, **face_style(cell.face))
        elif cell.glyph is Glyph.BLANK:
            # Without colour, show the status initial so the line stays readable.
            char = cell.status.value[0] if not cell.face.future else "."
        chars.append(char)
    return "".join(chars)


def render_agenda_line(
    row: AgendaRow,
    graph_column: int = 40,
    completed_glyph: str = "*",
    today_glyph: str = "!",
    color: bool = True,
) -> str:
    """Habit title padded to graph_column, followed by its graph."""
    title = row.habit.title
    if len(title) >= graph_column:
        title = title[: max(graph_column - 2, 0)] + "~"
    return f"{title:<{graph_column}}" + render_graph(row.cells, completed_glyph, today_glyph, color)


def cells_to_dicts(cells: list[Cell]) -> list[dict]:
    """JSON-friendly form of a graph."""
    return [
        {
            "day": c.day.to_date().isoformat() if c.tooltip else c.day.day_number,
            "glyph": c.glyph.value,
            "status": c.status.value,
            "face": c.face.name,
            "tooltip": c.tooltip,
        }
        for c in cells
    ]
