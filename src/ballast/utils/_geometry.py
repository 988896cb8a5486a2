import numpy as np


def sphere_volume(radius):
    """(4/3) * pi * r^3 for a float or an array of radii (numpy or jax)."""
    return (4.0 / 3.0) * np.pi * radius**3
