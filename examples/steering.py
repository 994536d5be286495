"""
Build a field with a few poles, then let an agent drift along its field lines.

What we need:
- a bounded flow field with an attracting and a repelling pole
- an agent position, updated at a fixed time step
- the perpendicular normalized vector as heading, so that the agent circles
  the poles instead of falling into them
"""

import flowfield as ff
import numpy as np
import logging


def set_logging(loglevel: str = "INFO"):
	log_c = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]

	if isinstance(loglevel, str):
		ll = loglevel.upper()
		assert ll in log_c, "Invalid log level"

	elif isinstance(loglevel, int):
		assert loglevel >= 0 and loglevel < len(log_c), "Invalid log level"
		ll = log_c[loglevel]

	else:
		raise ValueError("Invalid log level")

	loglevel = getattr(logging, ll, None)

	logging.basicConfig(level=loglevel, force=True)

	logging.getLogger().handlers[0].setFormatter(logging.Formatter('%(levelname)s:%(message)s'))


def steer(field: ff.fields.FlowField2D, start, speed: float = 0.5, dt: float = 0.1, steps: int = 200):
	"""Integrate the agent position along the perpendicular field direction."""

	pos = np.asarray(start, dtype=np.float32)
	path = [pos.copy()]

	for _ in range(steps):
		heading = field.get_perp_normalized_vec(pos[0], pos[1])
		pos = pos + speed * dt * np.asarray(heading, dtype=np.float32)
		path.append(pos.copy())

	return np.array(path)


if __name__ == "__main__":

	set_logging("INFO")

	field = ff.fields.get_field("bounded", {
		"poles": [(-3.0, 0.5, 4.0), (3.0, -0.5, -2.0)]
	})
	field.add_pole(ff.fields.Pole2D(0.0, 4.0, 1.5))

	logging.info(f"Field created: {field}")

	path = steer(field, start=(0.7, 1.3))

	logging.info(f"Agent moved from {path[0]} to {path[-1]} in {len(path)-1} steps")

	grid = ff.fields.sample_grid(field, np.linspace(-5, 5, 11), np.linspace(-5, 5, 11), mode="normalized")
	logging.info(f"Sampled normalized field on a {grid.shape[1]}x{grid.shape[0]} grid")
