"""A 2D environment in which an agent steers towards a piece of fruit."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import IntEnum

import numpy as np

MAX_REWARD = 1.0
MAX_OBJECTS = 1
DEFAULT_RADIUS = 4.0

_VELOCITY_DELTA = 0.5
_MAX_VELOCITY = 0.5
_DISTANCE_REWARD_SCALE = 0.35


class AgentAction(IntEnum):
    """Actions the fruit agent may take."""

    FORWARD = 0
    BACKWARD = 1
    LEFT = 2
    RIGHT = 3
    NONE = 5


NUM_ACTIONS = 4

# Up and down look reversed on screen because the y axis points down.
_ACTION_NAMES = {
    AgentAction.FORWARD: "DOWN ",
    AgentAction.BACKWARD: "UP   ",
    AgentAction.LEFT: "LEFT ",
    AgentAction.RIGHT: "RIGHT",
    AgentAction.NONE: "NONE ",
}


def action_to_str(action) -> str:
    """Return the fixed-width display name of an action, or "NULL " if unknown."""
    try:
        return _ACTION_NAMES[AgentAction(action)]
    except ValueError:
        return "NULL "


@dataclass
class FruitObject:
    """A circular goal object in the world."""

    x: float = 0.0
    y: float = 0.0
    reward: float = MAX_REWARD
    radius: float = DEFAULT_RADIUS
    color: tuple[float, float, float, float] = (1.0, 1.0, 0.0, 1.0)

    def check_collision(self, obj_x: float, obj_y: float, obj_radius: float) -> bool:
        """True when the circles' outlines touch or intersect."""
        s2 = self.distance_sq(obj_x, obj_y)
        r0 = self.radius - obj_radius
        r1 = self.radius + obj_radius
        return r0 * r0 <= s2 <= r1 * r1

    def distance_sq(self, obj_x: float, obj_y: float) -> float:
        """Squared distance from this object's centre to a point."""
        sx = self.x - obj_x
        sy = self.y - obj_y
        return sx * sx + sy * sy


@dataclass
class FruitEnv:
    """The fruit world: an agent with velocity control chasing fruit."""

    world_width: int
    world_height: int
    render_width: int | None = None
    render_height: int | None = None
    max_episode_length: int = 100
    rng: random.Random = field(default_factory=random.Random)

    def __post_init__(self) -> None:
        if self.render_width is None:
            self.render_width = self.world_width
        if self.render_height is None:
            self.render_height = self.world_height
        self.agent_x = 0.0
        self.agent_y = 0.0
        self.agent_dir = 0.0
        self.agent_vel_x = 0.0
        self.agent_vel_y = 0.0
        self.agent_radius = DEFAULT_RADIUS
        self.agent_color = (1.0, 0.0, 1.0, 1.0)
        self.bg_color = (0.0, 0.0, 0.0, 0.0)
        self.frame_count = 0
        self.last_distance_sq = 0.0
        self.spawn_distance_sq = 0.0
        self.fruits = [FruitObject() for _ in range(MAX_OBJECTS)]
        self.reset()

    @property
    def max_reward(self) -> float:
        """The reward that signifies a win."""
        return MAX_REWARD

    def step(self, action) -> tuple[bool, float]:
        """Apply an action; return (end_of_episode, reward)."""
        if action == AgentAction.FORWARD:
            self.agent_vel_y += _VELOCITY_DELTA
        elif action == AgentAction.BACKWARD:
            self.agent_vel_y -= _VELOCITY_DELTA
        elif action == AgentAction.RIGHT:
            self.agent_vel_x += _VELOCITY_DELTA
        elif action == AgentAction.LEFT:
            self.agent_vel_x -= _VELOCITY_DELTA

        self.agent_vel_x = max(-_MAX_VELOCITY, min(_MAX_VELOCITY, self.agent_vel_x))
        self.agent_vel_y = max(-_MAX_VELOCITY, min(_MAX_VELOCITY, self.agent_vel_y))
        self.agent_x += self.agent_vel_x
        self.agent_y += self.agent_vel_y

        out_of_bounds = False
        if self.agent_x < 0.0:
            self.agent_x = 0.0
            out_of_bounds = True
        elif self.agent_x > self.world_width:
            self.agent_x = float(self.world_width)
            out_of_bounds = True
        if self.agent_y < 0.0:
            self.agent_y = 0.0
            out_of_bounds = True
        elif self.agent_y > self.world_height:
            self.agent_y = float(self.world_height)
            out_of_bounds = True

        if out_of_bounds:
            self.reset()
            return True, -MAX_REWARD

        for fruit in self.fruits:
            if fruit.check_collision(self.agent_x, self.agent_y, self.agent_radius):
                reward = fruit.reward
                self.reset()
                return True, reward

        if self.frame_count > self.max_episode_length:
            self.reset()
            return True, -MAX_REWARD

        self.frame_count += 1
        _, distance_sq = self.find_closest()
        reward = (math.sqrt(self.last_distance_sq) - math.sqrt(distance_sq)) * _DISTANCE_REWARD_SCALE
        self.last_distance_sq = distance_sq
        return False, reward

    def find_closest(self) -> tuple[FruitObject | None, float]:
        """Return the fruit closest to the agent and its squared distance."""
        closest: FruitObject | None = None
        min_dist = 0.0
        for fruit in self.fruits:
            dist = fruit.distance_sq(self.agent_x, self.agent_y)
            if closest is None or dist < min_dist:
                closest = fruit
                min_dist = dist
        return closest, min_dist

    def render(self) -> np.ndarray:
        """Render the world as a (height, width, 4) float32 RGBA image in 0..1."""
        ys, xs = np.mgrid[0:self.render_height, 0:self.render_width].astype(np.float32)

        def inside(cx: float, cy: float, radius: float) -> np.ndarray:
            return (xs - cx) ** 2 + (ys - cy) ** 2 <= radius * radius

        image = np.empty((self.render_height, self.render_width, 4), dtype=np.float32)
        image[...] = self.bg_color
        image[inside(self.agent_x, self.agent_y, self.agent_radius)] = self.agent_color
        for fruit in self.fruits:
            image[inside(fruit.x, fruit.y, fruit.radius)] = fruit.color
        return image

    def reset(self) -> None:
        """Start a new episode: centre the fruit and place the agent at random."""
        self.frame_count = 0
        for fruit in self.fruits:
            fruit.x = self.world_width * 0.5
            fruit.y = self.world_height * 0.5
        self.agent_dir = 0.0
        self.agent_vel_x = 0.0
        self.agent_vel_y = 0.0
        while True:
            self.agent_x = self.rng.uniform(0.0, self.world_width)
            self.agent_y = self.rng.uniform(0.0, self.world_height)
            if not any(
                fruit.check_collision(self.agent_x, self.agent_y, self.agent_radius)
                for fruit in self.fruits
            ):
                break
        _, self.last_distance_sq = self.find_closest()
        self.spawn_distance_sq = self.last_distance_sq