# skymotion/drone/spec_catalog.py
"""
Load-time configuration of vehicle classes. A catalog maps a class name to
its read-only DroneSpec and always carries a 'default' entry, so lookups
for an unconfigured class fall back to the default airframe.
"""
import json
import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from .data_models import DroneSpec, DEFAULT_DRONE_SPEC
from .exceptions import SpecConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SPEC_NAME = "default"

class DroneSpecCatalog:
    """Named DroneSpecs shared read-only across all instances of a class."""

    def __init__(self, specs: Optional[Mapping[str, DroneSpec]] = None):
        self._specs: Dict[str, DroneSpec] = {DEFAULT_SPEC_NAME: DEFAULT_DRONE_SPEC}
        for name, spec in (specs or {}).items():
            self.register(name, spec)

    def register(self, name: str, spec: DroneSpec) -> None:
        if not isinstance(spec, DroneSpec):
            raise SpecConfigurationError(name, spec, "Expected a DroneSpec")
        self._specs[name] = spec

    def get(self, name: str) -> DroneSpec:
        """Returns the spec for `name`, or the default spec if it is unknown."""
        spec = self._specs.get(name)
        if spec is None:
            logger.warning(f"No drone spec named '{name}', using '{DEFAULT_SPEC_NAME}'")
            return self._specs[DEFAULT_SPEC_NAME]
        return spec

    def names(self) -> List[str]:
        return sorted(self._specs)

    def __contains__(self, name: str) -> bool:
        return name in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> 'DroneSpecCatalog':
        """
        Reads a JSON object of the form {"name": {field: value, ...}, ...}.
        Fields may be snake_case or camelCase; missing ones take the default.
        """
        path = Path(path)
        try:
            with path.open('r', encoding='utf-8') as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise SpecConfigurationError(str(path), None, f"Cannot read drone catalog ({e})") from e

        if not isinstance(raw, dict):
            raise SpecConfigurationError(str(path), type(raw).__name__, "Catalog must be a JSON object")

        specs = {}
        for name, entry in raw.items():
            if not isinstance(entry, dict):
                raise SpecConfigurationError(name, entry, "Catalog entry must be a JSON object")
            specs[name] = DroneSpec.from_dict(entry)

        logger.info(f"Loaded {len(specs)} drone spec(s) from {path}")
        return cls(specs)

def load_drone_specs(path: Union[str, Path]) -> DroneSpecCatalog:
    """Convenience wrapper around DroneSpecCatalog.from_json."""
    return DroneSpecCatalog.from_json(path)
