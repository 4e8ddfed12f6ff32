from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class VectorFloat:
    x: float
    y: float
