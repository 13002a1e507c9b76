"""Trace logger recording each resolution's source results to JSON files."""

import dataclasses
import enum
import uuid
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from sollagarathi.data import Outcome
from sollagarathi.policy import PolicyEvaluation


class SourceRecord(BaseModel):
    """Record of a single adapter call."""

    source: str
    is_local: bool
    status: str
    kind: str
    payload: str | None = None
    reason: str | None = None
    duration_seconds: float = 0.0


class ResolutionRecord(BaseModel):
    """Record of a complete resolution."""

    trace_id: str
    query: str
    mode: str
    started_at: str
    completed_at: str | None = None
    sources: list[SourceRecord] = []
    cache_filled: bool = False
    outcome: dict[str, Any] | None = None


def _serialize(obj: Any) -> Any:
    """Serialize an object to JSON-compatible format.

    Handles objects with ``to_dict``, dataclasses, Pydantic models, enums,
    lists, tuples, dicts and primitives.
    """
    if obj is None:
        return None
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {k: _serialize(v) for k, v in dataclasses.asdict(obj).items()}
    if isinstance(obj, BaseModel):
        return obj.model_dump()
    if isinstance(obj, enum.Enum):
        return obj.value
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, list | tuple):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {k: _serialize(v) for k, v in obj.items()}
    if isinstance(obj, Path):
        return str(obj)
    return obj


class ResolutionLogger:
    """Writes one JSON trace file per resolution.

    When ``enabled=False``, nothing is written.

    Args:
        log_dir: Directory to write JSON trace files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written trace file, or None."""
        return self._last_log_path

    def write(
        self,
        query: str,
        evaluation: PolicyEvaluation,
        outcome: Outcome,
        *,
        started_at: datetime,
        cache_filled: bool = False,
    ) -> Path | None:
        """Write the trace of one resolution.

        Args:
            query: The resolved query.
            evaluation: Adapter calls made for the query.
            outcome: The outcome returned to the caller.
            started_at: When resolution began.
            cache_filled: Whether the query was written back to the store.

        Returns:
            Path to the written JSON file, or None if logging is disabled.
        """
        if not self._enabled:
            return None

        record = ResolutionRecord(
            trace_id=str(uuid.uuid4()),
            query=query,
            mode=str(evaluation.mode),
            started_at=started_at.isoformat(),
            completed_at=datetime.now(tz=UTC).isoformat(),
            sources=[
                SourceRecord(
                    source=call.result.source,
                    is_local=call.is_local,
                    status=str(call.result.status),
                    kind=str(call.result.kind),
                    payload=call.result.payload,
                    reason=call.result.reason,
                    duration_seconds=round(call.duration_seconds, 4),
                )
                for call in evaluation.calls
            ],
            cache_filled=cache_filled,
            outcome=_serialize(outcome),
        )

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # resolve_2026-02-12T14-30-00_ab12cd34.json (colons → dashes)
        ts = record.started_at.replace(":", "-").split(".")[0].split("+")[0]
        filepath = self._log_dir / f"resolve_{ts}_{record.trace_id[:8]}.json"

        filepath.write_text(record.model_dump_json(indent=2), encoding="utf-8")
        self._last_log_path = filepath
        return filepath
