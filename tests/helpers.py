"""Pointer helpers shared by the session tests."""

# A 320-unit canvas at 100% zoom maps 10 units per cell on a 32 grid
CANVAS = 320


def tap(session, x, y, canvas=CANVAS):
    """Press and release on the centre of cell (x, y)."""
    step = canvas / session.grid_size
    session.pointer_press(x * step + step / 2, y * step + step / 2, canvas)
    session.pointer_release()
