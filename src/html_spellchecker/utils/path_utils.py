# src/html_spellchecker/utils/path_utils.py
import logging
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving the package paths.
    """

    # --- Package specific paths

    @staticmethod
    def get_package_root() -> Path:
        """Returns the absolute path of the installed html_spellchecker package."""
        return Path(__file__).resolve().parent.parent

    @staticmethod
    def get_settings_file() -> Path:
        return PathUtils.get_package_root() / "settings.json"

    # --- Helper methods ---

    @staticmethod
    def get_personal_word_list(locale: str, base_dir: Union[str, Path]) -> Optional[Path]:
        """
        Returns the personal word list for a locale (e.g. <dir>/en_US.txt),
        or None when no such file exists.
        """
        path = Path(base_dir) / f"{locale}.txt"
        if not path.is_file():
            logger.debug("No personal word list for %s at %s", locale, path)
            return None
        return path
