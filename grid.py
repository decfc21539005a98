"""Fixed-size two-dimensional storage for dynamic programming tables."""


from typing import Generic, List, Sequence, Tuple, TypeVar, cast


T = TypeVar('T')


Coordinate = Tuple[int, int]


class Grid(Generic[T]):
    """A dense rows x columns grid, stored in row-major order.

    Access is by (row, column) pair: grid[i, j]. Coordinates are checked
    against the dimensions; negative coordinates do not wrap around.
    """

    def __init__(self, rows: int, columns: int, fill: T) -> None:
        if rows < 0 or columns < 0:
            raise ValueError(f'negative grid dimensions {rows}x{columns}')
        self.rows = rows
        self.columns = columns
        self._storage: List[T] = [fill] * (rows * columns)

    @classmethod
    def from_rows(cls, contents: Sequence[Sequence[T]]) -> 'Grid[T]':
        columns = len(contents[0]) if contents else 0
        if any(len(row) != columns for row in contents):
            raise ValueError('rows of a grid must have equal length')
        result = cls(len(contents), columns, cast(T, None))
        result._storage = [x for row in contents for x in row]
        return result

    def _offset(self, key: Coordinate) -> int:
        row, column = key
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(f'grid index {key} out of range for '
                    f'{self.rows}x{self.columns} grid')
        return row * self.columns + column

    def __getitem__(self, key: Coordinate) -> T:
        return self._storage[self._offset(key)]

    def __setitem__(self, key: Coordinate, value: T) -> None:
        self._storage[self._offset(key)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.rows, self.columns) == (other.rows, other.columns) \
                and self._storage == other._storage

    def __repr__(self) -> str:
        return f'Grid({self.rows}, {self.columns})'
