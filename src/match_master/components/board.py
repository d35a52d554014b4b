from dataclasses import dataclass

@dataclass(slots=True)
class Board:
    rows: int
    cols: int

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols
