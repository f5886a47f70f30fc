from dataclasses import dataclass, field
from typing import Any, Dict

from odometer.components.format_spec import FormatSpec


@dataclass
class InstanceState:
    """Logical state of a single odometer instance."""
    value: float
    format: FormatSpec
    options: Dict[str, Any] = field(default_factory=dict)
    is_animating: bool = False
    destroyed: bool = False
