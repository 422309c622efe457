from dataclasses import dataclass

@dataclass(slots=True)
class Board:
    """Square grid footprint. Cells live on their own entities."""
    size: int

    def __post_init__(self) -> None:
        if self.size < 2:
            raise ValueError(f"Board size must be at least 2, got {self.size}")

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size
