from typing import Tuple

import numpy as np


def normalize_with_norm(x: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Normalizes a vector and returns the norm, handling the zero vector."""
    x = np.asarray(x, dtype=np.float64)
    norm = np.linalg.norm(x, axis=-1, keepdims=True)
    safe_norm = np.where(norm == 0.0, 1.0, norm)
    normalized_x = np.where(norm == 0.0, np.zeros_like(x), x / safe_norm)
    return normalized_x, norm[..., 0]
