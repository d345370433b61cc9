"""Data models for py-box."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class NameGeneratorConfig:
    """Construction-time settings for a name generator."""

    seed: Optional[int] = None
    separator: str = " "
    capitalize: bool = False
    add_numbers: bool = False


@dataclass(frozen=True)
class WordLists:
    """Fixed vocabularies sampled by the name generator."""

    adjectives: tuple[str, ...]
    animals: tuple[str, ...]


@dataclass
class Options:
    """Resolved options for a single py-box run."""

    root: str
    add: list[str] = field(default_factory=list)
    vscode: bool = False
    name: Optional[str] = None
    copy: Optional[str] = None
    seed: Optional[int] = None
    max_attempts: Optional[int] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for logging."""
        result = {
            "root": self.root,
            "add": list(self.add),
            "vscode": self.vscode,
        }

        if self.name:
            result["name"] = self.name
        if self.copy:
            result["copy"] = self.copy
        if self.seed is not None:
            result["seed"] = self.seed
        if self.max_attempts is not None:
            result["max_attempts"] = self.max_attempts

        return result
