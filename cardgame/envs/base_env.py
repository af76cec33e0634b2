# cardgame/envs/base_env.py

from abc import ABC, abstractmethod
from typing import Tuple, Dict, Any, Optional
import logging
import numpy as np
from numpy.random import Generator

from cardgame.core.utils import spaces


# Configure logging for the base environment
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO) # Set to INFO for general messages, DEBUG for detailed tracing

RENDER_MODES = (None, "ansi", "human")


class BaseCardEnv(ABC):
    """
    Abstract Base Class for card game environments driven by discrete events.
    Defines the API that a presentation layer calls into: `reset` to start,
    `step` for each user event, and `render` to draw the current view.

    Attributes:
        render_mode (Optional[str]): The rendering mode ('human', 'ansi', None).
        action_space (spaces.DiscreteSpace): The events the environment accepts.
        _np_random (numpy.random.Generator): The random number generator for the environment.
        action_description (str): A string describing the action space.
    """

    def __init__(self, render_mode: Optional[str] = None, seed: Optional[int] = None):
        if render_mode not in RENDER_MODES:
            raise ValueError(f"Unsupported render mode {render_mode!r}, expected one of {RENDER_MODES}.")
        self.render_mode = render_mode

        # Initialize random number generator
        self._np_random: Generator = np.random.default_rng(seed)

        self.action_space: spaces.DiscreteSpace # Will be set by subclass
        self.action_description: str = "No action description provided."

    @abstractmethod
    def _reset_game_state(self) -> Tuple[Any, Dict[str, Any]]:
        """Initializes the game-specific state and returns the first observation and info."""
        raise NotImplementedError

    def reset(self, seed: Optional[int] = None) -> Tuple[Any, Dict[str, Any]]:
        """
        Resets the environment to an initial state and returns the initial observation.

        Args:
            seed (Optional[int]): An optional seed for reproducibility. If provided,
                                  the environment's internal RNG will be re-seeded.

        Returns:
            Tuple[Any, Dict[str, Any]]:
                - observation (Any): The initial observation of the environment's state.
                - info (Dict): Auxiliary information.
        """
        if seed is not None:
            self._reseed(np.random.default_rng(seed))
            logger.debug(f"Environment re-seeded with {seed}.")

        observation, info = self._reset_game_state()
        self._auto_render()

        logger.info(f"Environment reset. Observation: {observation}")
        return observation, info

    def _reseed(self, rng: Generator) -> None:
        """Replaces the generator. Subclasses that hand the generator on must override this."""
        self._np_random = rng

    @abstractmethod
    def _step_game_logic(self, action: int) -> Tuple[Any, Dict[str, Any]]:
        """Applies a validated action and returns the new observation and info."""
        raise NotImplementedError

    def step(self, action: int) -> Tuple[Any, Dict[str, Any]]:
        """
        Applies an event and returns the next observation and info.

        Raises:
            ValueError: If the action is not part of the action space.
        """
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action {action!r}. Valid actions: {self.action_description}")

        observation, info = self._step_game_logic(int(action))
        self._auto_render()

        logger.debug(f"Step completed. Action: {action}, Next Obs: {observation}")
        return observation, info

    @abstractmethod
    def _get_observation(self) -> Any:
        """Constructs and returns the current observation."""
        raise NotImplementedError

    def _auto_render(self) -> None:
        if self.render_mode == "human":
            self._render_human()
        elif self.render_mode == "ansi":
            print(self._render_ansi())

    def render(self) -> Optional[str]:
        """
        Renders the current state of the environment based on the render_mode.
        """
        if self.render_mode == "ansi":
            return self._render_ansi()
        elif self.render_mode == "human":
            self._render_human()
        return None

    @abstractmethod
    def _render_ansi(self) -> str:
        """Returns a string representation of the current state for ANSI output."""
        raise NotImplementedError

    def _render_human(self) -> None:
        """Renders the state to the console for human readability."""
        print(self._render_ansi())

    def close(self) -> None:
        """
        Performs any necessary cleanup (e.g., closing rendering windows).
        Subclasses should implement this if cleanup is needed.
        """
        pass
