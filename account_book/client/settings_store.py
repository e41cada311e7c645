"""
Local Settings Store

Client settings are kept in a JSON file on the user's machine. They are
loaded when the settings form opens and written back only on an explicit
save; no server round-trip is involved.
"""

from pathlib import Path
from typing import Union

from account_book.log import get_logger
from account_book.models.settings import ClientSettings


logger = get_logger(__name__)


class SettingsStore:
    """Load and save `ClientSettings` at a fixed path."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> ClientSettings:
        """Stored settings, or the defaults when nothing was saved yet."""
        if not self._path.exists():
            return ClientSettings()
        return ClientSettings.model_validate_json(self._path.read_text(encoding="utf-8"))

    def save(self, settings: ClientSettings) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(settings.model_dump_json(indent=2), encoding="utf-8")
        logger.info("client_settings_saved", path=str(self._path))
