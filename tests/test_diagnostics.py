from pixel_studio.diagnostics import collect_diagnostics, process_memory_mb
from .helpers import tap


def test_process_memory_is_positive():
    assert process_memory_mb() > 0


def test_collect_diagnostics(session):
    tap(session, 0, 0)
    session.add_layer()
    tap(session, 1, 1)
    stats = collect_diagnostics(session)
    assert stats["layer_count"] == 2
    assert stats["pixel_count"] == 2
    assert stats["grid_size"] == 32
    assert stats["history"]["size"] == 3
    assert stats["history"]["undo_count"] == 2
    assert stats["memory_mb"] > 0
