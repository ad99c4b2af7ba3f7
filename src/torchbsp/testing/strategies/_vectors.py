import hypothesis.strategies

from torchbsp.euclidean import Vector


@hypothesis.strategies.composite
def vectors(
    draw: hypothesis.strategies.DrawFn,
    dimension: int = 3,
    min_value: float = -1e3,
    max_value: float = 1e3,
) -> Vector:
    """Strategy for finite Euclidean vectors."""
    coordinates = draw(
        hypothesis.strategies.lists(
            hypothesis.strategies.floats(
                min_value=min_value,
                max_value=max_value,
                allow_nan=False,
                allow_infinity=False,
            ),
            min_size=dimension,
            max_size=dimension,
        )
    )
    return Vector(coordinates)
