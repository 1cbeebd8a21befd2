# src/validator_shell/core/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving important project and user paths.
    """

    # --- Project specific paths

    @staticmethod
    def get_project_root() -> Path:
        """
        Returns the absolute path of the project root.
        Searches upwards for a directory containing 'src' and 'pyproject.toml'.
        """
        current_path = Path(__file__).resolve().parent
        while current_path != current_path.parent:
            src_dir = current_path / "src"
            pyproject_toml = current_path / "pyproject.toml"
            if src_dir.is_dir() and pyproject_toml.is_file():
                return current_path
            current_path = current_path.parent
        raise FileNotFoundError(
            "Could not find the project root. Search for a directory containing 'src' and 'pyproject.toml'.")

    @staticmethod
    def get_shell_package_root() -> Path:
        """Directory of the validator_shell package (where settings.json lives)."""
        return Path(__file__).resolve().parents[2]

    @staticmethod
    def get_samples_dir(relative: str = "samples") -> Path:
        """
        Returns the directory holding the sample documents.
        An absolute `relative` is returned as is.
        """
        path = Path(relative)
        if path.is_absolute():
            return path
        return PathUtils.get_project_root() / path

    # --- User specific paths ---

    @staticmethod
    def get_prompt_history_file() -> Path:
        """
        Returns the path to the filename prompt history in the user's home directory.
        (e.g., ~/.htmlval_history)
        """
        return Path.home() / ".htmlval_history"
