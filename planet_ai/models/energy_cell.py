"""Energy cells and the fixed-size bank a planet stores them in.

A cell is binary: empty or fully charged.  The bank scans its cells in
insertion order, so "first free" and "first full" are always deterministic.
"""

from __future__ import annotations

from collections.abc import Iterator

from planet_ai.models.events import Sunray


class EnergyCell:
    """A single storage unit charged by one sunray."""

    def __init__(self) -> None:
        self._charged = False

    def __repr__(self) -> str:
        return f"EnergyCell(charged={self._charged})"

    def is_charged(self) -> bool:
        return self._charged

    def charge(self, sunray: Sunray) -> None:
        # The sunray is absorbed whole; charging a full cell wastes it.
        self._charged = True

    def discharge(self) -> None:
        """Empty the cell.

        Raises ValueError if the cell holds no charge.
        """
        if not self._charged:
            raise ValueError("Energy cell is not charged")
        self._charged = False


class EnergyCellBank:
    """Ordered, fixed-capacity collection of energy cells.

    The cell tuple is created once and never resized; the charged count is
    always derived from the cells themselves.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"Energy cell bank needs at least one cell, got {capacity}")
        self._cells: tuple[EnergyCell, ...] = tuple(EnergyCell() for _ in range(capacity))

    def __iter__(self) -> Iterator[EnergyCell]:
        return iter(self._cells)

    def count(self) -> int:
        return len(self._cells)

    def charged_count(self) -> int:
        return sum(1 for cell in self._cells if cell.is_charged())

    def cell(self, index: int) -> EnergyCell:
        """Return the cell at index or raise IndexError."""
        if not 0 <= index < len(self._cells):
            raise IndexError(f"Energy cell index {index} out of range (0..{len(self._cells) - 1})")
        return self._cells[index]

    def full_cell(self) -> tuple[EnergyCell, int] | None:
        """Return the first charged cell and its index, or None."""
        for index, cell in enumerate(self._cells):
            if cell.is_charged():
                return cell, index
        return None

    def empty_cell(self) -> tuple[EnergyCell, int] | None:
        """Return the first uncharged cell and its index, or None."""
        for index, cell in enumerate(self._cells):
            if not cell.is_charged():
                return cell, index
        return None

    def charge(self, sunray: Sunray) -> Sunray | None:
        """Charge the first free cell with the sunray.

        Returns None once the sunray has been stored.  When every cell is
        already charged nothing changes and the sunray comes back as leftover.
        """
        free = self.empty_cell()
        if free is None:
            return sunray
        cell, _ = free
        cell.charge(sunray)
        return None
