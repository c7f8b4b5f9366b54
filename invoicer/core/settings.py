from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional, Union
import json
import logging

from invoicer.core.paths import settings_path

logger = logging.getLogger(__name__)

# Path to the settings.json (runtime-aware)
SETTINGS_PATH = settings_path()


@dataclass
class Settings:
	window_title: str = "Invoices"
	# Printable layout: "compact" or "extended"
	template: str = "compact"
	# Device pixels per logical pixel when rasterising the printable view
	export_scale: int = 2
	# Remember last used folder for the "Download PDF" dialog
	last_export_dir: Optional[str] = None
	# Open the PDF in the system viewer once written
	open_after_export: bool = False
	dark_mode: bool = False

	@classmethod
	def from_dict(cls, data: Dict[str, Any]) -> "Settings":
		# Merge provided values over defaults, ignore unknown keys
		defaults = asdict(cls())
		merged: Dict[str, Any] = {**defaults, **{k: v for k, v in data.items() if k in defaults}}
		try:
			merged["export_scale"] = max(1, int(merged["export_scale"]))
		except (TypeError, ValueError):
			merged["export_scale"] = defaults["export_scale"]
		return cls(**merged)

	def to_dict(self) -> Dict[str, Any]:
		return asdict(self)


def _coerce_path(path: Optional[Union[str, Path]]) -> Path:
	return Path(path) if path is not None else SETTINGS_PATH


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
	"""
	Load settings from JSON (UTF-8). If the file is missing, write defaults and return them.
	"""
	p = _coerce_path(path)
	if not p.exists():
		settings = Settings()
		try:
			save_settings(settings, p)
		except OSError:
			logger.warning("Could not write default settings to %s", p)
		return settings

	try:
		with p.open("r", encoding="utf-8") as f:
			raw: Dict[str, Any] = json.load(f)
	except (json.JSONDecodeError, OSError):
		# Unreadable/corrupt: use defaults, leave the file alone
		logger.warning("Ignoring unreadable settings file %s", p)
		return Settings()

	return Settings.from_dict(raw if isinstance(raw, dict) else {})


def save_settings(settings: Settings, path: Optional[Union[str, Path]] = None) -> None:
	"""Save settings to JSON (UTF-8), creating parent dirs if needed."""
	p = _coerce_path(path)
	p.parent.mkdir(parents=True, exist_ok=True)
	tmp = p.with_suffix(p.suffix + ".tmp")
	with tmp.open("w", encoding="utf-8", newline="\n") as f:
		json.dump(settings.to_dict(), f, indent=2, ensure_ascii=False)
		f.write("\n")
	tmp.replace(p)
