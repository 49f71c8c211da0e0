import random

import numpy as np
import pytest

from rlgames.fruit_env import (
    AgentAction,
    FruitEnv,
    FruitObject,
    action_to_str,
)


def make_env(seed=0, **kwargs):
    return FruitEnv(48, 48, rng=random.Random(seed), **kwargs)


@pytest.mark.parametrize(
    "action, name",
    [
        (AgentAction.FORWARD, "DOWN "),
        (AgentAction.BACKWARD, "UP   "),
        (AgentAction.LEFT, "LEFT "),
        (AgentAction.RIGHT, "RIGHT"),
        (AgentAction.NONE, "NONE "),
        (4, "NULL "),
        (99, "NULL "),
    ],
)
def test_action_to_str(action, name):
    assert action_to_str(action) == name


def test_collision_touching_and_apart():
    fruit = FruitObject(x=0.0, y=0.0)
    assert fruit.check_collision(8.0, 0.0, 4.0)
    assert not fruit.check_collision(8.5, 0.0, 4.0)


def test_collision_inner_ring_excluded():
    fruit = FruitObject(x=0.0, y=0.0, radius=4.0)
    assert not fruit.check_collision(1.0, 0.0, 2.0)
    assert fruit.check_collision(3.0, 0.0, 2.0)


def test_distance_sq_symmetric():
    fruit = FruitObject(x=1.0, y=2.0)
    other = FruitObject(x=4.0, y=6.0)
    assert fruit.distance_sq(4.0, 6.0) == other.distance_sq(1.0, 2.0)
    assert fruit.distance_sq(1.0, 2.0) == 0.0


def test_reset_places_fruit_at_centre_without_overlap():
    for seed in range(20):
        env = make_env(seed)
        fruit = env.fruits[0]
        assert (fruit.x, fruit.y) == (24.0, 24.0)
        assert not fruit.check_collision(env.agent_x, env.agent_y, env.agent_radius)
        assert 0.0 <= env.agent_x <= 48.0
        assert 0.0 <= env.agent_y <= 48.0
        assert env.frame_count == 0
        assert env.last_distance_sq == env.spawn_distance_sq


def test_render_size_defaults_to_world():
    env = make_env()
    assert (env.render_width, env.render_height) == (48, 48)
    env2 = make_env(render_width=32, render_height=16)
    assert env2.render().shape == (16, 32, 4)


def test_find_closest_matches_distance():
    env = make_env()
    fruit, dist = env.find_closest()
    assert fruit is env.fruits[0]
    assert dist == fruit.distance_sq(env.agent_x, env.agent_y)


def test_out_of_bounds_loses_and_resets():
    env = make_env()
    env.agent_x = 0.0
    env.agent_y = 10.0
    env.agent_vel_x = 0.0
    env.agent_vel_y = 0.0
    end, reward = env.step(AgentAction.LEFT)
    assert end is True
    assert reward == -env.max_reward
    assert env.agent_vel_x == 0.0
    assert env.frame_count == 0


def test_reaching_fruit_wins():
    env = make_env()
    env.agent_x = 24.0
    env.agent_y = 32.4
    env.agent_vel_x = 0.0
    env.agent_vel_y = 0.0
    end, reward = env.step(AgentAction.BACKWARD)
    assert end is True
    assert reward == env.max_reward


def test_velocity_is_clamped():
    env = make_env()
    env.agent_x, env.agent_y = 5.0, 5.0
    env.agent_vel_x = env.agent_vel_y = 0.0
    env.last_distance_sq = env.find_closest()[1]
    env.step(AgentAction.RIGHT)
    env.step(AgentAction.RIGHT)
    env.step(AgentAction.RIGHT)
    assert env.agent_vel_x == 0.5
    assert env.agent_x == pytest.approx(6.5)


def test_approaching_fruit_rewards_positive_and_retreating_negative():
    env = make_env()
    env.agent_x, env.agent_y = 24.0, 40.0
    env.agent_vel_x = env.agent_vel_y = 0.0
    env.last_distance_sq = env.find_closest()[1]
    end, reward = env.step(AgentAction.BACKWARD)
    assert end is False
    assert reward > 0.0
    env.agent_vel_y = 0.0
    end, reward = env.step(AgentAction.FORWARD)
    end, reward = env.step(AgentAction.FORWARD)
    assert end is False
    assert reward < 0.0


def test_timeout_after_max_frames():
    env = make_env(seed=3, max_episode_length=5)
    results = [env.step(AgentAction.NONE) for _ in range(7)]
    assert all(end is False and reward == 0.0 for end, reward in results[:6])
    assert results[6] == (True, -env.max_reward)
    assert env.frame_count == 0


def test_render_colours():
    env = make_env()
    env.agent_x, env.agent_y = 5.0, 5.0
    image = env.render()
    assert image.shape == (48, 48, 4)
    assert image.dtype == np.float32
    np.testing.assert_array_equal(image[24, 24], [1.0, 1.0, 0.0, 1.0])
    np.testing.assert_array_equal(image[5, 5], [1.0, 0.0, 1.0, 1.0])
    np.testing.assert_array_equal(image[47, 47], [0.0, 0.0, 0.0, 0.0])
    assert image.min() >= 0.0 and image.max() <= 1.0


def test_render_fruit_drawn_over_agent():
    env = make_env()
    env.agent_x, env.agent_y = 24.0, 24.0
    image = env.render()
    np.testing.assert_array_equal(image[24, 24], env.fruits[0].color)