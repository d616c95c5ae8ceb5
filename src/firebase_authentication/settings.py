"""
Runtime settings.

Settings are declared in settings_manifest.yaml and read by name with
get_setting(). Values are cached per process until clear_cache().
"""
import os
import sys
import logging
import yaml
from pathlib import Path
from typing import Dict, Optional, List
from dataclasses import dataclass

logger = logging.getLogger(__name__)

MANIFEST_PATH = Path(__file__).parent / "settings_manifest.yaml"


class SettingNotDefinedException(Exception):
    """Raised when a setting name is not defined in the manifest."""

    def __init__(self, setting_name: str, available_settings: List[str]):
        self.setting_name = setting_name
        self.available_settings = available_settings
        super().__init__(
            f"Setting '{setting_name}' is not defined. "
            f"Available settings: {', '.join(sorted(available_settings))}"
        )


class SettingValueNotFoundException(Exception):
    """Raised when a required setting has no value."""

    def __init__(self, setting_name: str, env_var: str):
        self.setting_name = setting_name
        self.env_var = env_var
        super().__init__(f"Setting '{setting_name}' requires environment variable '{env_var}' to be set")


@dataclass(frozen=True)
class SettingDefinition:
    """A setting declared in the manifest."""
    name: str
    env_var: str
    secret: bool = False
    required: bool = True
    description: str = ""

    def read(self) -> Optional[str]:
        value = (os.environ.get(self.env_var) or "").strip()
        if value:
            return value
        if self.required:
            raise SettingValueNotFoundException(self.name, self.env_var)
        return None


_manifest: Optional[Dict[str, SettingDefinition]] = None
_values: Dict[str, Optional[str]] = {}


def _load_manifest() -> Dict[str, SettingDefinition]:
    global _manifest

    if _manifest is None:
        with open(MANIFEST_PATH, 'r') as f:
            data = yaml.safe_load(f) or {}

        manifest = {}
        for entry in data.get('settings', []):
            source_type, env_var = entry['source'].split(':', 1)
            if source_type != 'env-var':
                raise ValueError(f"Unknown source type '{source_type}' for setting '{entry['name']}'")
            manifest[entry['name']] = SettingDefinition(
                name=entry['name'],
                env_var=env_var,
                secret=entry.get('secret', False),
                required=entry.get('required', True),
                description=entry.get('description', ''),
            )
        _manifest = manifest
        logger.debug(f"Loaded {len(manifest)} settings from {MANIFEST_PATH.name}")

    return _manifest


def get_setting(name: str) -> Optional[str]:
    """
    Get a setting value by name.

    Returns:
        The value, or None for an unset optional setting

    Raises:
        SettingNotDefinedException: If the name is not in the manifest
        SettingValueNotFoundException: If a required setting has no value
    """
    if name not in _values:
        manifest = _load_manifest()
        if name not in manifest:
            raise SettingNotDefinedException(name, list(manifest))
        _values[name] = manifest[name].read()
    return _values[name]


def describe_settings() -> List[Dict[str, str]]:
    """Each setting's name, environment variable and display value, secrets masked."""
    rows = []
    for setting in _load_manifest().values():
        try:
            value = get_setting(setting.name)
        except SettingValueNotFoundException:
            value = None

        if value is None:
            display_value = "<NOT SET>"
        elif setting.secret:
            display_value = "***MASKED***"
        else:
            display_value = value
        rows.append({'name': setting.name, 'env_var': setting.env_var, 'value': display_value})
    return rows


def print_settings(file=None):
    """Print the settings table to stderr (or the given file)."""
    file = file or sys.stderr
    rows = describe_settings()
    width = max(len(row['env_var']) for row in rows)

    print(f"{'SETTING':<15} {'ENV VAR':<{width}} VALUE", file=file)
    for row in rows:
        value = row['value'] if len(row['value']) <= 40 else row['value'][:37] + "..."
        print(f"{row['name']:<15} {row['env_var']:<{width}} {value}", file=file)


def clear_cache():
    """Forget the manifest and cached values. Useful for testing."""
    global _manifest
    _manifest = None
    _values.clear()
