"""Supported ecosystems and the directories they leave behind."""

from enum import Enum
from pathlib import Path
from typing import Dict, FrozenSet, Optional, Tuple


class Language(Enum):
    """Ecosystems whose build or dependency directories can be cleaned."""

    DOTNET = "dotnet"
    RUST = "rust"
    JAVASCRIPT = "javascript"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Language":
        """Parses a language from its command line name.

        Args:
            name (str): The language name, case-insensitive.

        Returns:
            Language: The matching language.

        Raises:
            ValueError: If the name is not a known language.
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(language.value for language in cls)
            raise ValueError(
                f"Unknown language: '{name}' (choose from {choices})"
            ) from None

    @classmethod
    def names(cls) -> Tuple[str, ...]:
        """Returns the command line names of all languages."""
        return tuple(language.value for language in cls)


_TARGETS: Dict[Language, Tuple[str, ...]] = {
    Language.DOTNET: ("bin", "obj"),
    Language.RUST: ("target",),
    Language.JAVASCRIPT: ("node_modules",),
}

# Exact manifest names are matched case-insensitively, suffixes exactly.
_MARKER_NAMES: Dict[Language, Tuple[str, ...]] = {
    Language.DOTNET: (),
    Language.RUST: ("cargo.toml",),
    Language.JAVASCRIPT: ("package.json",),
}

_MARKER_SUFFIXES: Dict[Language, Tuple[str, ...]] = {
    Language.DOTNET: (".sln", ".csproj"),
    Language.RUST: (),
    Language.JAVASCRIPT: (),
}


def targets(language: Language) -> FrozenSet[str]:
    """Returns the names of the disposable directories for a language.

    Args:
        language (Language): The selected ecosystem.

    Returns:
        FrozenSet[str]: Directory names considered build or dependency artifacts.
    """
    return frozenset(_TARGETS[language])


def ordered_targets(language: Language) -> Tuple[str, ...]:
    """Returns the target names for a language in declaration order."""
    return _TARGETS[language]


def is_marker(filename: str, language: Language) -> bool:
    """Checks if a filename is a project manifest for the given language."""
    if filename.lower() in _MARKER_NAMES[language]:
        return True
    return Path(filename).suffix in _MARKER_SUFFIXES[language]


def detect_language(directory: Path) -> Optional[Language]:
    """Detects the ecosystem of a project directory from its manifest files.

    The first manifest found decides; directories without one are not projects.

    Args:
        directory (Path): The directory to inspect.

    Returns:
        Optional[Language]: The detected language, or None.

    Raises:
        OSError: If the directory cannot be listed.
    """
    for entry in sorted(directory.iterdir()):
        for language in Language:
            if is_marker(entry.name, language):
                return language
    return None
