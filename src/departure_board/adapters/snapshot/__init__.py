"""Simulation snapshot adapters."""

from departure_board.adapters.snapshot.snapshot_loader import Snapshot, SnapshotLoader

__all__ = ["Snapshot", "SnapshotLoader"]
