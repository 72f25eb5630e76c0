"""
Game run recording: one directory per game with an append-only
events.jsonl and a metadata.json describing the setup.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Dict, Any, Iterator, List, Optional

EVENTS_FILE = "events.jsonl"
METADATA_FILE = "metadata.json"


def _read_jsonl(path: Path) -> Iterator[Dict[str, Any]]:
    with open(path, 'r') as f:
        for line_number, line in enumerate(f, 1):
            if not line.strip():
                continue
            try:
                yield json.loads(line)
            except json.JSONDecodeError as e:
                print(f"Warning: Skipping bad event on line {line_number} of {path}: {e}")


def summarize_events(events: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Outcome, last round and eliminations of a recorded game."""
    summary: Dict[str, Any] = {"event_count": len(events), "rounds": 0, "eliminated": []}
    for event in events:
        data = event.get("data", {})
        summary["rounds"] = max(summary["rounds"], data.get("round") or 0)
        if event.get("event_type") == "elimination":
            summary["eliminated"].append(data.get("player"))
        elif event.get("event_type") == "game_over":
            summary["game_outcome"] = data.get("result")
    return summary


class RunRecorder:
    """Writes the events of one game at a time under runs_dir/<run name>/."""

    def __init__(self, runs_dir: str = "runs"):
        self.runs_dir = Path(runs_dir)
        self.runs_dir.mkdir(parents=True, exist_ok=True)
        self.current_run_dir: Optional[Path] = None
        self._sequence = 0

    def create_run(self, run_name: Optional[str] = None) -> str:
        """Start a new run directory and return its name (timestamped by default)."""
        run_name = run_name or datetime.now().strftime("run_%Y%m%d_%H%M%S")
        self.current_run_dir = self.runs_dir / run_name
        self.current_run_dir.mkdir(exist_ok=True)
        self._sequence = 0
        return run_name

    def get_run_path(self) -> Optional[Path]:
        return self.current_run_dir

    def record_event(self, event_type: str, data: Dict[str, Any]) -> None:
        """Append one event; a no-op until a run has been created."""
        if self.current_run_dir is None:
            return
        event = {
            "sequence": self._sequence,
            "timestamp": datetime.now().isoformat(),
            "event_type": event_type,
            "data": data,
        }
        self._sequence += 1
        with open(self.current_run_dir / EVENTS_FILE, 'a') as f:
            f.write(json.dumps(event) + '\n')

    def save_metadata(self, metadata: Dict[str, Any]) -> None:
        """Players, roles and game settings, so the run can be replayed."""
        if self.current_run_dir is None:
            return
        with open(self.current_run_dir / METADATA_FILE, 'w') as f:
            json.dump(metadata, f, indent=2)

    @staticmethod
    def load_events(run_dir: str) -> List[Dict[str, Any]]:
        """Read a run's events back in recording order."""
        events_path = Path(run_dir) / EVENTS_FILE
        if not events_path.exists():
            raise FileNotFoundError(f"No events recorded in {run_dir}")
        return sorted(_read_jsonl(events_path), key=lambda e: e.get("sequence", 0))

    @staticmethod
    def load_metadata(run_dir: str) -> Dict[str, Any]:
        metadata_path = Path(run_dir) / METADATA_FILE
        if not metadata_path.exists():
            return {}
        with open(metadata_path, 'r') as f:
            return json.load(f)

    def list_runs(self) -> List[Dict[str, Any]]:
        """Summaries of every recorded game, newest name first."""
        runs = []
        for run_dir in sorted(self.runs_dir.iterdir(), reverse=True):
            if not run_dir.is_dir():
                continue
            run_info: Dict[str, Any] = {"name": run_dir.name, "path": str(run_dir)}

            try:
                run_info["metadata"] = self.load_metadata(str(run_dir))
            except json.JSONDecodeError as e:
                print(f"Warning: Could not read metadata for {run_dir.name}: {e}")

            if (run_dir / EVENTS_FILE).exists():
                run_info.update(summarize_events(self.load_events(str(run_dir))))
            runs.append(run_info)
        return runs
