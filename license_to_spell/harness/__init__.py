from .core import run_round, run_batch, SimulatedClock
from .io import write_csv, write_manifest
from .summary import summarize

__all__ = ["run_round", "run_batch", "SimulatedClock", "write_csv", "write_manifest", "summarize"]
