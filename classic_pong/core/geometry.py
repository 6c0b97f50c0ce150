"""
Geometry helpers for collision detection
"""


def clamp(value: float, min_value: float, max_value: float) -> float:
    """Limits value to the range [min_value, max_value]"""
    return max(min_value, min(max_value, value))


def circle_intersects_rect(
    cx: float, cy: float, radius: float, rect: tuple[float, float, float, float]
) -> bool:
    """
    Detects overlap between a circle and an axis-aligned rectangle.

    The closest point of the rectangle to the circle center is found by clamping
    each coordinate independently. The shapes intersect when that point lies
    strictly closer than the radius, so a tangent circle does not count and a
    circle whose center is inside the rectangle always does.

    Args:
        cx: Circle center x
        cy: Circle center y
        radius: Circle radius
        rect: Rectangle as (x, y, width, height), not rotated

    Returns:
        bool: True if the circle and the rectangle overlap
    """
    x, y, width, height = rect

    # Closest point on the rectangle to the circle center
    closest_x = clamp(cx, x, x + width)
    closest_y = clamp(cy, y, y + height)

    distance_x = cx - closest_x
    distance_y = cy - closest_y
    distance_squared = distance_x * distance_x + distance_y * distance_y

    return distance_squared < radius * radius
