"""State and control trajectories made of knot points."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

import numpy as np

from altrokit.knotpoint import KnotPoint


class Trajectory:
    """A sequence of N+1 knot points spanning N segments."""

    def __init__(self, knotpoints: Iterable[KnotPoint]) -> None:
        self._points = list(knotpoints)
        if not self._points:
            raise ValueError("A trajectory needs at least one knot point.")

    @classmethod
    def zeros(cls, state_dim: int, control_dim: int, num_segments: int) -> "Trajectory":
        """Trajectory of ``num_segments`` segments with all values zero."""
        if num_segments < 0:
            raise ValueError(f"Number of segments must be non-negative, got {num_segments}")
        return cls(KnotPoint.zeros(state_dim, control_dim) for _ in range(num_segments + 1))

    @classmethod
    def from_states(
        cls,
        states: Sequence,
        controls: Sequence,
        times: Sequence[float],
    ) -> "Trajectory":
        """Build a trajectory from N+1 states, N controls and N+1 times.

        Time steps are taken from consecutive times; the last knot point is
        terminal with a zero control.
        """
        if len(states) != len(controls) + 1:
            raise ValueError(
                "Length of control vector must be one less than the length of "
                "the state trajectory."
            )
        if len(states) != len(times):
            raise ValueError(
                "Length of times vector must be equal to the length of the state trajectory."
            )
        if not controls:
            raise ValueError("At least one control is needed to size the terminal control.")
        points = [
            KnotPoint(x, u, t, t_next - t)
            for x, u, t, t_next in zip(states, controls, times, times[1:])
        ]
        terminal_control = np.zeros_like(np.asarray(controls[-1], dtype=float))
        points.append(KnotPoint(states[-1], terminal_control, times[-1], 0.0))
        return cls(points)

    def num_segments(self) -> int:
        """Number of segments, one less than the number of knot points."""
        return len(self._points) - 1

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[KnotPoint]:
        return iter(self._points)

    def __getitem__(self, k: int) -> KnotPoint:
        return self._points[k]

    def set_zero(self) -> None:
        """Set every state and control to zero."""
        for z in self._points:
            z.state[:] = 0.0
            z.control[:] = 0.0

    def set_uniform_step(self, h: float) -> None:
        """Give every segment step ``h`` and times starting at zero."""
        n = self.num_segments()
        for k, z in enumerate(self._points[:-1]):
            z.step = float(h)
            z.time = k * float(h)
        last = self._points[-1]
        last.step = 0.0
        last.time = float(h) * n

    def check_time_consistency(self, eps: float = 1e-6, verbose: bool = False) -> bool:
        """True if ``t[k+1] - t[k]`` matches the stored step for every segment."""
        for k, (z, z_next) in enumerate(zip(self._points, self._points[1:])):
            h_calc = z_next.time - z.time
            if abs(z.step - h_calc) > eps:
                if verbose:
                    print(f"k={k}\t h={z.step}")
                    print(f"t-={z.time}\t t+={z_next.time}\t dt={h_calc}")
                return False
        return True