"""A single point of a state and control trajectory."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

_MAX_TIME = 10.0
_MAX_STEP = 1.0
_RESOLUTION = 100


def _as_vector(values, name: str) -> np.ndarray:
    vec = np.array(values, dtype=float)
    if vec.ndim != 1:
        raise ValueError(f"{name} must be a one-dimensional vector, got shape {vec.shape}")
    return vec


def _check_dims(state_dim: int, control_dim: int) -> None:
    if state_dim < 0:
        raise ValueError(f"State dimension must be non-negative, got {state_dim}")
    if control_dim < 0:
        raise ValueError(f"Control dimension must be non-negative, got {control_dim}")


@dataclass
class KnotPoint:
    """State, control, time and time step at one knot point.

    A knot point with a zero time step is the terminal point of a trajectory.
    """

    state: np.ndarray
    control: np.ndarray
    time: float = 0.0
    step: float = 0.0

    def __post_init__(self) -> None:
        self.state = _as_vector(self.state, "state")
        self.control = _as_vector(self.control, "control")
        self.time = float(self.time)
        self.step = float(self.step)

    @classmethod
    def zeros(cls, state_dim: int, control_dim: int) -> "KnotPoint":
        """Knot point with zero state, control, time and step."""
        _check_dims(state_dim, control_dim)
        return cls(np.zeros(state_dim), np.zeros(control_dim))

    @classmethod
    def random(cls, state_dim: int, control_dim: int) -> "KnotPoint":
        """Knot point with entries uniform in [-1, 1] and a random time and step."""
        _check_dims(state_dim, control_dim)
        state = np.random.uniform(-1.0, 1.0, state_dim)
        control = np.random.uniform(-1.0, 1.0, control_dim)
        time = _MAX_TIME * np.random.randint(0, _RESOLUTION) / _RESOLUTION
        step = _MAX_STEP * np.random.randint(0, _RESOLUTION) / _RESOLUTION
        return cls(state, control, time, step)

    def state_control(self) -> np.ndarray:
        """The state and control stacked into one vector."""
        return np.concatenate((self.state, self.control))

    def is_terminal(self) -> bool:
        """True if this is the last knot point of a trajectory (zero step)."""
        return self.step == 0

    def set_terminal(self) -> None:
        """Make this a terminal knot point: zero step and zero control."""
        self.step = 0.0
        self.control[:] = 0.0

    def to_string(self, width: int = 9) -> str:
        """One-line rendering of the states, controls, time and step."""
        xs = "".join(f"{v: >{width}.3g} " for v in self.state)
        us = "".join(f"{v: >{width}.3g} " for v in self.control)
        return f"x: [{xs}] u: [{us}] t={self.time:4.2g}, h={self.step:4.2g}"

    def copy(self) -> "KnotPoint":
        """Independent copy of this knot point."""
        return KnotPoint(self.state.copy(), self.control.copy(), self.time, self.step)

    def __str__(self) -> str:
        return self.to_string()