"""Process-wide default options.

Instances merge a snapshot of these defaults once, at construction; changing
them later never reaches existing instances.
"""
from __future__ import annotations

import copy
import json
import logging
from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import Any, Dict

from odometer.constants import DEFAULT_SELECTOR

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GlobalOptions:
    """Discovery settings plus option defaults applied to new instances."""
    selector: str = DEFAULT_SELECTOR
    auto: bool = True
    defaults: Dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


_global_options = GlobalOptions()


def get_global_options() -> GlobalOptions:
    return copy.deepcopy(_global_options)


def set_global_options(**changes: Any) -> GlobalOptions:
    """Merge ``changes`` into the defaults record in one step.

    ``selector`` and ``auto`` replace the record's fields; any other key becomes
    an instance option default.
    """
    global _global_options
    defaults = dict(_global_options.defaults)
    defaults.update(changes.pop("defaults", None) or {})
    fields = {key: changes.pop(key) for key in ("selector", "auto") if key in changes}
    defaults.update(changes)
    _global_options = replace(_global_options, defaults=defaults, **fields)
    return get_global_options()


def reset_global_options() -> None:
    global _global_options
    _global_options = GlobalOptions()


def load_global_options(path: Path | str) -> GlobalOptions:
    """Merge defaults from a JSON object stored at ``path``."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Odometer options file {path} must contain a JSON object")
    options = set_global_options(**data)
    logger.info("Loaded odometer global options from %s", path)
    return options
