"""
Extension rules for file classification.

Maps a file extension to the category folder it belongs in.
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_RULES: Dict[str, str] = {
    ".jpg": "Images",
    ".jpeg": "Images",
    ".png": "Images",
    ".pdf": "Documents",
    ".doc": "Documents",
    ".docx": "Documents",
    ".txt": "Documents",
    ".mp3": "Music",
    ".wav": "Music",
    ".mp4": "Video",
    ".avi": "Video",
    ".zip": "Archives",
    ".rar": "Archives",
}


def split_extension(path: Union[str, Path]) -> Tuple[str, str]:
    """
    Split a file's base name at its last dot.

    Unlike Path.suffix, a dotfile keeps its whole name as the extension
    (".txt" -> ("", ".txt")). Case is preserved.

    Args:
        path: File name or path

    Returns:
        (name without extension, extension including the dot)
    """
    name = Path(path).name
    index = name.rfind(".")
    if index == -1:
        return name, ""
    return name[:index], name[index:]


def file_extension(path: Union[str, Path]) -> str:
    """
    Get the normalized extension of a file name.

    The extension runs from the last dot of the base name to the end and is
    lowercased, so ".bashrc" has the extension ".bashrc". Names without a
    dot have no extension.

    Args:
        path: File name or path

    Returns:
        Lowercase extension including the dot, or "" if there is none
    """
    return split_extension(path)[1].lower()


class ExtensionRules(BaseModel):
    """Immutable extension -> category table."""

    mapping: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_RULES),
        description="Lowercase extension (with leading dot) to category name",
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("mapping")
    @classmethod
    def normalize_extensions(cls, value: Dict[str, str]) -> Dict[str, str]:
        normalized: Dict[str, str] = {}
        for ext, category in value.items():
            ext = ext.strip().lower()
            if not ext or ext == ".":
                raise ValueError("extension must not be empty")
            if not ext.startswith("."):
                ext = f".{ext}"
            if (
                not category
                or category.strip() in {"", ".", ".."}
                or any(sep in category for sep in "/\\")
            ):
                raise ValueError(f"invalid category for {ext}: {category!r}")
            normalized[ext] = category.strip()
        return normalized

    @classmethod
    def default(cls) -> "ExtensionRules":
        return cls()

    @property
    def categories(self) -> List[str]:
        """Distinct category names, in table order."""
        return list(dict.fromkeys(self.mapping.values()))

    def classify(self, path: Union[str, Path]) -> Optional[str]:
        """
        Find the category for a file.

        Args:
            path: File name or path

        Returns:
            Category name, or None if the extension has no rule
        """
        ext = file_extension(path)
        if not ext:
            return None
        return self.mapping.get(ext)
