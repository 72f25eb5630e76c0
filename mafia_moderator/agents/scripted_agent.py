"""
Scripted agent: plays back choices from a YAML script or a recorded run.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional

from .base_agent import BaseAgent, AgentContext, NightChoice
from ..core import RoleType
from ..config.game_config import GameConfig, default_config
from ..recording.run_recorder import RunRecorder


class ScriptedAgent(BaseAgent):
    """
    Agent that answers from a fixed script.

    Script format (YAML or dict)::

        rounds:
          2:
            night:
              Mafia: Alice
              Doctor: Alice
              Cupid: [Bob, Carol]
            lynch: Dave

    Roles or rounds missing from the script mean "no choice".
    """

    def __init__(self, script: Dict[str, Any], config: GameConfig = default_config):
        super().__init__(config)
        self.rounds: Dict[int, Dict[str, Any]] = {}
        for round_number, entry in (script.get("rounds") or {}).items():
            entry = entry or {}
            night = {
                RoleType.from_name(role): target
                for role, target in (entry.get("night") or {}).items()
            }
            self.rounds[int(round_number)] = {"night": night, "lynch": entry.get("lynch")}

    @classmethod
    def from_yaml(cls, script_path: str, config: GameConfig = default_config) -> "ScriptedAgent":
        """Load a script from a YAML file."""
        path = Path(script_path)
        if not path.exists():
            raise FileNotFoundError(f"Script file not found: {script_path}")
        with open(path, 'r') as f:
            script = yaml.safe_load(f) or {}
        return cls(script, config)

    @classmethod
    def from_run(cls, run_dir: str, config: GameConfig = default_config) -> "ScriptedAgent":
        """
        Rebuild the choices of a recorded run from its events.jsonl.
        Together with the run's seed and player order this replays the game.
        """
        rounds: Dict[int, Dict[str, Any]] = {}
        for event in RunRecorder.load_events(run_dir):
            data = event.get("data", {})
            event_type = event.get("event_type")
            if event_type == "night_choice":
                entry = rounds.setdefault(data["round"], {"night": {}})
                entry["night"][data["role"]] = data["target"]
            elif event_type == "lynch_vote":
                entry = rounds.setdefault(data["round"], {"night": {}})
                entry["lynch"] = data["target"]
        return cls({"rounds": rounds}, config)

    @classmethod
    def load(cls, script_path: str, config: GameConfig = default_config) -> "ScriptedAgent":
        """Load from a recorded run directory or a YAML script file."""
        if Path(script_path).is_dir():
            return cls.from_run(script_path, config)
        return cls.from_yaml(script_path, config)

    def get_night_choice(self, role_type: RoleType, context: AgentContext) -> NightChoice:
        entry = self.rounds.get(context.round_number, {})
        return entry.get("night", {}).get(role_type)

    def get_lynch_vote(self, context: AgentContext) -> Optional[str]:
        entry = self.rounds.get(context.round_number, {})
        return entry.get("lynch")
