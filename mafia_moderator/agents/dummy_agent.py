"""
Dummy Agent implementation with seeded random behavior.
"""

import random
from typing import List, Optional

from .base_agent import BaseAgent, AgentContext, NightChoice
from ..core import RoleType, Team
from ..config.game_config import GameConfig, default_config


class DummyAgent(BaseAgent):
    """
    Simple dummy agent with random but reproducible behavior:
    - Mafia: attack a random living non-Mafia player
    - Serial Killer, Barman: pick a random living player other than themselves
    - Doctor, Lawyer: pick any random living player
    - Cupid: link two random living players
    - Lynch: nominate a random living player, or nobody with lynch_skip_chance
    """

    def __init__(self, config: GameConfig = default_config, lynch_skip_chance: float = 0.2):
        super().__init__(config)
        # Offset from the game seed so agent choices don't mirror the role shuffle
        seed = config.random_seed
        if seed is not None:
            self.random = random.Random(seed + 1)
        else:
            self.random = random.Random()
        self.lynch_skip_chance = lynch_skip_chance

    def get_night_choice(self, role_type: RoleType, context: AgentContext) -> NightChoice:
        acting_names = {p.name for p in context.acting_players}

        if role_type == RoleType.CUPID:
            if len(context.alive_players) < 2:
                return None
            first, second = self.random.sample(context.alive_names, 2)
            return first, second

        if role_type == RoleType.MAFIA:
            candidates = [p.name for p in context.alive_players if p.team != Team.MAFIA]
        elif role_type in (RoleType.SERIAL_KILLER, RoleType.BARMAN):
            candidates = [name for name in context.alive_names if name not in acting_names]
        else:
            candidates = context.alive_names

        return self._pick(candidates)

    def get_lynch_vote(self, context: AgentContext) -> Optional[str]:
        if self.random.random() < self.lynch_skip_chance:
            return None
        return self._pick(context.alive_names)

    def _pick(self, candidates: List[str]) -> Optional[str]:
        if not candidates:
            return None
        return self.random.choice(candidates)
