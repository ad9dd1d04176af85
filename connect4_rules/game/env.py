"""
env.py - Gymnasium environment wrapping a Connect Four session

Agents outside this package can drive the rules engine through the standard
reset/step interface. Both players' moves come in through step(); rewards are
given from Player ONE's point of view.
"""

from typing import Any, Dict, Optional, Tuple, Union

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connect4_rules.debug import debug
from connect4_rules.errors import IllegalMoveError, OutOfRangeError
from connect4_rules.game.session import GameSession
from connect4_rules.utils import HEIGHT, WIDTH, GameStatus


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    reward_win = 1.0
    reward_lose = -1.0
    reward_draw = 0.1
    reward_invalid_move = -0.5
    reward_step = -0.01  # Small negative reward to encourage faster solutions

    def __init__(self, render_mode: Optional[str] = None,
                 height: int = HEIGHT, width: int = WIDTH):
        """
        Initialize the environment.

        Args:
            render_mode: "ascii", "human" or None
            height: Number of board rows
            width: Number of board columns
        """
        debug.debug("Initializing ConnectFourEnv", "env")
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        self.session = GameSession(height, width)
        self.render_mode = render_mode

        self.action_space = spaces.Discrete(width)
        self.observation_space = spaces.Box(
            low=0, high=2, shape=(height, width), dtype=np.int8
        )

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict]:
        debug.debug("Resetting environment", "env")
        super().reset(seed=seed)
        self.session.reset()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict]:
        """
        Take a step by dropping the current player's piece.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")

        try:
            result = self.session.attempt_move(action)
        except (OutOfRangeError, IllegalMoveError) as e:
            debug.warning(f"Invalid action {action}: {e}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        reward = self.reward_step
        terminated = result.status.is_game_over()
        if result.status == GameStatus.PLAYER_ONE_WIN:
            reward = self.reward_win
        elif result.status == GameStatus.PLAYER_TWO_WIN:
            reward = self.reward_lose
        elif result.status == GameStatus.DRAW:
            reward = self.reward_draw

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[Union[str, np.ndarray]]:
        if self.render_mode == "ascii":
            return self.session.render()
        if self.render_mode == "human":
            print(self.session.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.session.state.grid.astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        valid_moves = self.session.get_valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': self.session.current_player.value,
            'game_result': self.session.status.name,
            'moves_made': self.session.moves_accepted,
            'winning_line': self.session.winning_line(),
            'last_move': self.session.state.last_move,
        }
