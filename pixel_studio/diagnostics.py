import os

import psutil


def process_memory_mb() -> float:
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / (1024 * 1024)


def collect_diagnostics(session) -> dict:
    """Snapshot of memory and history usage for a debug overlay or log line."""
    layers = session.layers
    return {
        "memory_mb": round(process_memory_mb(), 1),
        "history": session.history.get_stats(),
        "grid_size": session.grid_size,
        "layer_count": len(layers),
        "pixel_count": sum(len(layer.pixels) for layer in layers),
    }
