"""Validators for scan roots."""

import os
import sys
from pathlib import Path
from typing import Set, Union


class PathValidator:
    """A class to validate scan roots before any traversal starts."""

    PROTECTED_PATHS: Set[Path] = {
        Path("/"),
        Path("/etc"),
        Path("/usr"),
        Path("/bin"),
        Path("/sbin"),
        Path("/boot"),
        Path("/sys"),
        Path("/proc"),
        Path("/dev"),
        Path("/var"),
        Path("/System"),  # macOS system folder
    }

    if sys.platform == "win32":
        PROTECTED_PATHS.update(
            {
                Path("C:\\"),
                Path("C:\\Windows"),
                Path("C:\\Program Files"),
                Path("C:\\Program Files (x86)"),
                Path("C:\\ProgramData"),
            }
        )

    @classmethod
    def validate_root(cls, root: Union[str, Path]) -> Path:
        """
        Validates the directory a scan starts from

        Args:
            root (Union[str, Path]): The directory path to validate

        Returns:
            Path: The resolved directory path

        Raises:
            FileNotFoundError: If the directory does not exist
            NotADirectoryError: If the path is not a directory
            PermissionError: If the directory cannot be listed
        """
        directory = Path(root).expanduser().resolve()

        if not directory.exists():
            raise FileNotFoundError(f"Directory does not exist: {directory}")

        if not directory.is_dir():
            raise NotADirectoryError(f"Path is not a directory: {directory}")

        if not os.access(directory, os.R_OK | os.X_OK):
            raise PermissionError(f"Directory is not readable: {directory}")

        return directory

    @classmethod
    def validate_delete_root(cls, root: Union[str, Path]) -> Path:
        """
        Validates a directory for a scan that deletes matches

        Args:
            root (Union[str, Path]): The directory path to validate

        Returns:
            Path: The resolved directory path

        Raises:
            FileNotFoundError: If the directory does not exist
            NotADirectoryError: If the path is not a directory
            ValueError: If the directory is a protected system path such as the filesystem root
        """
        directory = cls.validate_root(root)

        if directory in cls.PROTECTED_PATHS:
            raise ValueError(
                f"Deleting from system directories is not allowed: {directory}"
            )

        return directory
