"""
Main game loop for running a moderated Mafia game.
"""

import argparse
import os
import random
from typing import Dict, Optional

from dotenv import load_dotenv

from mafia_moderator import Moderator
from mafia_moderator.core import GamePhase, GameResult, InvalidTarget, describe_result, parse_roles
from mafia_moderator.agents import BaseAgent, DummyAgent, ScriptedAgent
from mafia_moderator.config.game_config import GameConfig
from mafia_moderator.config.config_loader import load_config
from mafia_moderator.recording import EventEmitter, RunRecorder


class ModeratorGame:
    """Main game controller: feeds agent choices to the moderator until the game ends."""

    def __init__(self, config: Optional[GameConfig] = None, agent: Optional[BaseAgent] = None,
                 event_emitter: Optional[EventEmitter] = None, run_name: Optional[str] = None):
        self.config = config or GameConfig()
        self.run_recorder: Optional[RunRecorder] = None

        # Generate seed if not provided
        if self.config.random_seed is None:
            self.config.random_seed = random.randint(0, 2**31 - 1)

        if event_emitter is None and self.config.record_runs:
            run_recorder = RunRecorder(self.config.runs_dir)
            run_name = run_recorder.create_run(run_name)
            event_emitter = EventEmitter(run_recorder)
            self.run_recorder = run_recorder
            print(f"Recording game to: {run_recorder.get_run_path()}/")
        elif event_emitter is not None:
            self.run_recorder = event_emitter.run_recorder

        self.event_emitter = event_emitter
        self.moderator = Moderator(self.config, event_emitter=event_emitter)
        self.agent = agent or self._create_agent(self.config.agent_type)

    def _create_agent(self, agent_type: str) -> BaseAgent:
        """Create an agent of the specified type."""
        agent_type = agent_type.lower()
        if agent_type == "dummy_agent":
            return DummyAgent(self.config)
        elif agent_type == "scripted_agent":
            if not self.config.script_path:
                raise ValueError("scripted_agent needs script_path (a YAML script or a run directory)")
            return ScriptedAgent.load(self.config.script_path, self.config)
        else:
            raise ValueError(
                f"Unknown agent_type: {agent_type}. "
                f"Must be 'dummy_agent' or 'scripted_agent'"
            )

    def setup_players(self) -> Dict[str, str]:
        """Distribute roles to the configured players. Returns {name: role}."""
        self.moderator.setup(
            self.config.num_mafia,
            parse_roles(self.config.additional_roles),
            self.config.total_players,
        )
        assignments = {}
        for name in self.config.get_player_names():
            role = self.moderator.enter_player(name)
            assignments[name] = role.role_type.value
        return assignments

    def play_night(self) -> None:
        """Wake each role in order, collect its choice and resolve the night."""
        moderator = self.moderator
        moderator.begin_night()
        print(f"\n--- NIGHT (Round {moderator.round_number}) ---")

        for role_type in moderator.night_roles():
            context = self.agent.build_context(moderator.game_state, role_type)
            choice = self.agent.get_night_choice(role_type, context)
            try:
                moderator.submit_night_choice(role_type, choice)
            except InvalidTarget as e:
                print(f"Rejected choice for {role_type.value}: {e.message}")
                moderator.submit_night_choice(role_type, None)

        events = moderator.resolve_night()
        self._print_events(events)

    def play_lynch(self) -> None:
        """Collect the community's nominee and resolve the lynch."""
        moderator = self.moderator
        print(f"\n--- LYNCH (Round {moderator.round_number}) ---")
        context = self.agent.build_context(moderator.game_state)
        nominee = self.agent.get_lynch_vote(context)
        try:
            moderator.submit_lynch_vote(nominee)
        except InvalidTarget as e:
            print(f"Rejected lynch vote: {e.message}")
            moderator.submit_lynch_vote(None)

        events = moderator.resolve_lynch()
        self._print_events(events[events.index("Lynch Events:"):])

    @staticmethod
    def _print_events(events) -> None:
        for line in events:
            if line:
                print(f"  {line}")

    def run_game(self) -> GameResult:
        """
        Run the complete game until a result or the max_rounds limit.
        Returns the final result (CONTINUE if stopped at the limit).
        """
        assignments = self.setup_players()

        if self.run_recorder:
            self.run_recorder.save_metadata({
                "players": list(assignments.keys()),
                "roles": assignments,
                "config": {
                    "num_mafia": self.config.num_mafia,
                    "total_players": self.config.total_players,
                    "additional_roles": list(self.config.additional_roles),
                    "agent_type": self.config.agent_type,
                    "max_rounds": self.config.max_rounds,
                    "random_seed": self.config.random_seed
                }
            })

        print("=" * 60)
        print("MAFIA GAME - Starting")
        print("=" * 60)
        for name, role in assignments.items():
            print(f"{name}: {role}")
        print("=" * 60)

        moderator = self.moderator
        while moderator.phase != GamePhase.GAME_OVER:
            if moderator.round_number > self.config.max_rounds:
                print(f"\n(Game stopped at max rounds limit: {self.config.max_rounds})")
                break
            self.play_night()
            if moderator.lynch_available:
                self.play_lynch()

        result = moderator.check_win()
        print("\n" + "=" * 60)
        print(f"GAME OVER - {describe_result(result)}")
        print("=" * 60)
        self._print_game_summary()
        return result

    def _print_game_summary(self) -> None:
        """Print a nicely formatted game summary."""
        state = self.moderator.game_state

        print("\nGAME SUMMARY")
        print("-" * 60)
        print(f"Rounds played: {state.round_number}")
        print(f"Random Seed: {self.config.random_seed}")

        alive_players = state.get_alive_players()
        if alive_players:
            print("\nAlive Players:")
            for player in alive_players:
                print(f"  - {player.name}: {player.role_type.value}")

        eliminated = [p for p in state.players if not p.is_alive]
        if eliminated:
            print(f"\nEliminated Players ({len(eliminated)}):")
            for player in eliminated:
                details = next(
                    (f"{a['data']['reason']} in round {a['round']}"
                     for a in state.action_log
                     if a["type"] == "player_eliminated" and a["data"]["player"] == player.name),
                    ""
                )
                print(f"  - {player.name}: {player.role_type.value} ({details})")

    def get_game_summary(self) -> Dict:
        """Get final game summary as dictionary."""
        state = self.moderator.game_state
        return {
            "result": state.result.value,
            "rounds": state.round_number,
            "final_state": state.get_game_summary(),
            "action_log": state.action_log[-10:],  # Last 10 actions
        }


def main():
    """Entry point for running a game."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Run a moderated Mafia game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                   # Default config, random choices
  python main.py --config configs/classic.yaml     # Custom roles and players
  python main.py --seed 42                         # Reproducible game
  python main.py --agent scripted_agent --script configs/script.yaml
  python main.py --script runs/run_20250101_120000 --seed 42   # Replay a recorded run
        """
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=os.environ.get("MAFIA_CONFIG"),
        help="Path to YAML configuration file (default: $MAFIA_CONFIG or built-in defaults)"
    )
    parser.add_argument(
        "--seed",
        "-s",
        type=int,
        default=None,
        help="Random seed for reproducible games (if not provided, one is generated and shown)"
    )
    parser.add_argument(
        "--agent",
        "-a",
        type=str,
        default=None,
        choices=["dummy_agent", "scripted_agent"],
        help="Who supplies the choices. Overrides config file setting."
    )
    parser.add_argument(
        "--script",
        type=str,
        default=None,
        help="YAML script or recorded run directory for scripted_agent (implies --agent scripted_agent)"
    )
    parser.add_argument(
        "--run-name",
        "-r",
        type=str,
        default=None,
        help="Custom name for this run (default: auto-generated timestamp)"
    )
    parser.add_argument(
        "--no-record",
        action="store_true",
        help="Do not write events to the runs directory"
    )

    args = parser.parse_args()

    config = load_config(args.config)
    config.runs_dir = os.environ.get("MAFIA_RUNS_DIR", config.runs_dir)

    if args.script is not None:
        config.script_path = args.script
        config.agent_type = "scripted_agent"
        # Replaying a run: reuse its players, roles and seed unless overridden
        if os.path.isdir(args.script):
            metadata = RunRecorder.load_metadata(args.script)
            recorded = metadata.get("config", {})
            if metadata.get("players"):
                config.player_names = metadata["players"]
                config.total_players = len(config.player_names)
            for key in ("num_mafia", "additional_roles"):
                if key in recorded:
                    setattr(config, key, recorded[key])
            if args.seed is None and recorded.get("random_seed") is not None:
                args.seed = recorded["random_seed"]
    if args.agent is not None:
        config.agent_type = args.agent
    if args.no_record:
        config.record_runs = False

    # Seed is only set via command line, ignore any seed in YAML config
    config.random_seed = args.seed

    print("Mafia Moderator")
    print("=" * 60)
    if args.config:
        print(f"Using config: {args.config}")
    print(f"Agent type: {config.agent_type}")
    print("=" * 60)

    game = ModeratorGame(config=config, run_name=args.run_name)
    game.run_game()

    if game.run_recorder:
        run_path = game.run_recorder.get_run_path()
        if run_path:
            print(f"\nGame events saved to: {run_path}")


if __name__ == "__main__":
    main()
