"""Tab expansion for logical lines."""

from .constants import ViewerConstants

TAB_STOP = ViewerConstants.TAB_STOP


def render_row(raw: str, tab_stop: int = TAB_STOP) -> str:
    """Return the display form of a raw line with tabs expanded to spaces.

    A tab always emits at least one space and then pads until the output
    column is a multiple of ``tab_stop``. Every other character is copied
    verbatim and advances the column by one.
    """
    out: list[str] = []
    column = 0
    for ch in raw:
        if ch == '\t':
            out.append(' ')
            column += 1
            while column % tab_stop != 0:
                out.append(' ')
                column += 1
        else:
            out.append(ch)
            column += 1
    return ''.join(out)


def render_column(raw: str, cursor_x: int, tab_stop: int = TAB_STOP) -> int:
    """Return the render column reached after expanding ``raw[:cursor_x]``.

    ``cursor_x`` is measured in rendered space, so on a tabbed line it may
    run past the end of ``raw``; the slice then covers the whole line.
    """
    render_x = 0
    for ch in raw[:cursor_x]:
        if ch == '\t':
            render_x += (tab_stop - 1) - (render_x % tab_stop)
        render_x += 1
    return render_x
