from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Callable, List, Optional
from arena.core.logging import logger

SETTINGS_FILENAME = ".arena_settings.json"

@dataclass
class SettingsData:
    log_level: str = "INFO"        # DEBUG / INFO / WARN / ERROR
    debug: bool = False            # Verbose engine diagnostics
    seed: Optional[int] = None     # Fixed RNG seed for reproducible battles
    player1_name: str = "Player 1"
    player2_name: str = "Player 2"

    def normalize(self):
        if self.log_level not in {"DEBUG","INFO","WARN","ERROR"}:
            self.log_level = "INFO"
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            self.seed = None
        self.player1_name = str(self.player1_name or "").strip() or "Player 1"
        self.player2_name = str(self.player2_name or "").strip() or "Player 2"

    def effective_log_level(self) -> str:
        # Without debug, keep the console quiet unless something goes wrong
        if not self.debug and self.log_level in {"INFO","DEBUG"}:
            return "WARN"
        return self.log_level

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path
        self._listeners: List[Callable[[SettingsData], None]] = []

    @classmethod
    def _resolve_path(cls) -> Path:
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        path = path or cls._resolve_path()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                # Unknown keys are dropped, missing ones keep their defaults
                field_names = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in field_names})
                data.normalize()
                logger.debug("SettingsLoaded", path=str(path))
                return cls(data, path)
            except (ValueError, TypeError, AttributeError, OSError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
        data = SettingsData()
        data.normalize()
        return cls(data, path)

    def save(self):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
            logger.debug("SettingsSaved", path=str(self.path))
        except OSError as e:
            logger.error("SettingsSaveFailed", error=str(e))

    def update(self, **changes):
        for k, v in changes.items():
            if not hasattr(self.data, k):
                raise AttributeError(f"Unknown setting {k!r}")
            setattr(self.data, k, v)
        self.data.normalize()
        self._notify()

    def apply_logging(self):
        from arena.core.logging import logger as global_logger
        global_logger.set_level(self.data.effective_log_level())  # type: ignore[arg-type]

    def on_change(self, fn: Callable[[SettingsData], None]):
        self._listeners.append(fn)

    def _notify(self):
        for fn in self._listeners:
            fn(self.data)
