"""Axis-aligned rectangles stored as float arrays ``[x, y, w, h]``."""

import numpy as np


def make_rect(x, y, w, h):
    return np.array([x, y, w, h], dtype=np.float64)


def center(rect):
    return rect[:2] + rect[2:] * 0.5


def intersect(a, b):
    """Return the overlap of ``a`` and ``b`` or ``None``.

    Rectangles that only touch produce a zero-sized overlap.
    """
    left = max(a[0], b[0])
    top = max(a[1], b[1])
    right = min(a[0] + a[2], b[0] + b[2])
    bottom = min(a[1] + a[3], b[1] + b[3])
    if right < left or bottom < top:
        return None
    return make_rect(left, top, right - left, bottom - top)


def _signum(v):
    # Zero counts as positive so centred hits still push out.
    return np.where(v >= 0, 1.0, -1.0)


def resolve_collision(rect, velocity, other):
    """Push ``rect`` out of ``other`` and bounce ``velocity`` away from it.

    ``rect`` and ``velocity`` are modified in place. The bounce axis is picked
    from the overlap shape: wider than tall means the hit came from above or
    below. Corner hits can land on the wrong axis with this rule.

    Returns True if the rectangles intersected.
    """
    overlap = intersect(rect, other)
    if overlap is None:
        return False

    direction = _signum(center(other) - center(rect))
    if overlap[2] > overlap[3]:
        rect[1] -= direction[1] * overlap[3]
        velocity[1] = -direction[1] * abs(velocity[1])
    else:
        rect[0] -= direction[0] * overlap[2]
        velocity[0] = -direction[0] * abs(velocity[0])
    return True
