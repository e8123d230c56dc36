from .core import play_session, run_batch
from .io import write_csv, write_manifest, timestamp_id

__all__ = ["play_session", "run_batch", "write_csv", "write_manifest", "timestamp_id"]
