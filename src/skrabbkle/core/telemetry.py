"""GameLogger: JSONL game logging.

One logger per game. Writes one JSONL line per turn plus a game summary
as the final line. All entries include schema version and game ID.
"""

import json
from dataclasses import dataclass, asdict, field
from datetime import datetime, timezone
from pathlib import Path

import skrabbkle
from skrabbkle.core.errors import ConfigurationError

_SCHEMA_VERSION = "1.0.0"


@dataclass
class TurnEntry:
    """One turn of game telemetry."""

    turn_number: int
    player: str
    notation: str
    is_pass: bool
    points: int
    score_after: int
    tiles_placed: int
    rack_before: list[str]
    rack_after: list[str]
    bag_remaining: int
    consecutive_passes: int
    latency_ms: float
    word: str | None = None
    anchor: str | None = None
    axis: str | None = None
    rejected_attempts: list[str] = field(default_factory=list)


class GameLogger:
    """Writes JSONL telemetry for a single game."""

    def __init__(self, output_dir: Path, game_id: str):
        self._output_dir = Path(output_dir)
        self._game_id = game_id
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigurationError(
                "logging.telemetry_dir", f"cannot create {self._output_dir}: {exc}"
            ) from exc
        self._file_path = self._output_dir / f"{game_id}.jsonl"

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def game_id(self) -> str:
        return self._game_id

    def log_turn(self, entry: TurnEntry) -> None:
        record = asdict(entry)
        record["schema_version"] = _SCHEMA_VERSION
        record["game_id"] = self._game_id
        record["timestamp"] = datetime.now(timezone.utc).isoformat()
        self._append(record)

    def finalize_game(
        self,
        scores: dict[str, int],
        penalties: dict[str, int],
        outcome: str,
        extra: dict | None = None,
    ) -> None:
        record = {
            "schema_version": _SCHEMA_VERSION,
            "record_type": "game_summary",
            "game_id": self._game_id,
            "final_scores": scores,
            "penalties": penalties,
            "outcome": outcome,
            "engine_version": skrabbkle.__version__,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        if extra:
            record.update(extra)
        self._append(record)

    def _append(self, record: dict) -> None:
        with open(self._file_path, "a") as f:
            f.write(json.dumps(record, default=str) + "\n")
