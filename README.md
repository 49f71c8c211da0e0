# rlgames

A small two-dimensional game world for experimenting with reinforcement-learning
agents. An agent steers by changing its velocity and tries to reach a piece of
fruit. An episode ends when the agent touches the fruit, leaves the world or
runs out of time.

Everything lives in `rlgames.fruit_env`. It uses plain Python numbers for the
game state and `numpy` arrays for the rendered image.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Usage

```python
import random

from rlgames.fruit_env import AgentAction, FruitEnv, action_to_str

env = FruitEnv(48, 48, 48, 48, 75, random.Random(0))

image = env.render()        # float32 RGBA array, shape (render_height, render_width, 4)
done, reward = env.step(AgentAction.FORWARD)
print(action_to_str(AgentAction.FORWARD), reward, done)
```

### `FruitEnv`

`FruitEnv(world_width, world_height, render_width=None, render_height=None,
max_episode_length=100, rng=random.Random())`. The render size defaults to the
world size. The environment resets itself when it is created.

- `step(action)` applies an action and returns `(end_of_episode, reward)`.
  `FORWARD` and `BACKWARD` add or subtract 0.5 from the vertical velocity.
  `RIGHT` and `LEFT` do the same to the horizontal velocity. Each velocity is
  held to the range -0.5 to 0.5, and then the agent moves.
  - Leaving the world ends the episode with a reward of `-max_reward`.
  - Touching a fruit ends the episode with that fruit's reward.
  - Going past `max_episode_length` frames ends the episode with `-max_reward`.
  - Otherwise the reward is 0.35 times how much closer the agent came to the
    nearest fruit.

  Each time an episode ends, the environment resets itself.
- `find_closest()` returns `(fruit, squared_distance)` for the fruit nearest to
  the agent.
- `render()` draws the background, then the agent (magenta), then the fruit
  (yellow). Colour values run from 0 to 1.
- `reset()` places the fruit at the centre of the world and gives the agent a
  random position that does not touch the fruit. It also sets the velocity to
  zero and the frame count to zero.
- `max_reward` is the reward that counts as a win (1.0).

### Actions

`AgentAction` has `FORWARD`, `BACKWARD`, `LEFT`, `RIGHT` and `NONE`.
`action_to_str(action)` returns a five-character display name: `"DOWN "`,
`"UP   "`, `"LEFT "`, `"RIGHT"` or `"NONE "`. Any other value gives `"NULL "`.
Forward shows as down because the image's y axis points downwards.

### `FruitObject`

`FruitObject` is a circular goal with a position, reward, radius and colour.
`check_collision(x, y, radius)` tells whether a circle's outline touches or
crosses the fruit's outline. `distance_sq(x, y)` returns the squared distance
from the fruit's centre to a point.

## What this package does not do

The package holds only the environment. It has:

- no learning agent and no training loop
- no statistics tracking across episodes
- no command-line program

You drive `FruitEnv` from your own code.

## Tests

```
pytest
```