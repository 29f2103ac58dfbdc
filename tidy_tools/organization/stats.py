"""
Run statistics for organization runs.
"""

from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class CategoryStats(BaseModel):
    """File count and byte total for one category."""

    count: int = Field(default=0, ge=0, description="Files moved into category")
    total_size: int = Field(default=0, ge=0, description="Bytes moved into category")


class MoveRecord(BaseModel):
    """A single successful move."""

    source_path: Path
    target_path: Path
    category: str
    size_bytes: int = Field(ge=0)


class RunSummary(BaseModel):
    """Result of one organize run over one source directory."""

    source_directory: Optional[Path] = None
    processed_files: int = 0
    unsupported: int = 0
    failed: int = 0
    categories: Dict[str, CategoryStats] = Field(default_factory=dict)
    moves: List[MoveRecord] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)

    @property
    def total_size(self) -> int:
        """Bytes moved across all categories."""
        return sum(stats.total_size for stats in self.categories.values())

    def record(
        self,
        category: str,
        size_bytes: int,
        source_path: Optional[Path] = None,
        target_path: Optional[Path] = None,
    ) -> CategoryStats:
        """
        Record a successfully moved file.

        Args:
            category: Category the file was moved into
            size_bytes: File size measured before the move
            source_path: Original path, if known
            target_path: Final path, if known

        Returns:
            Updated stats for the category
        """
        stats = self.categories.get(category)
        if stats is None:
            stats = CategoryStats()
            self.categories[category] = stats

        stats.count += 1
        stats.total_size += size_bytes
        self.processed_files += 1

        if source_path is not None and target_path is not None:
            self.moves.append(
                MoveRecord(
                    source_path=source_path,
                    target_path=target_path,
                    category=category,
                    size_bytes=size_bytes,
                )
            )

        return stats
