"""
Ordered, editable list of pipeline parameters.
"""

import logging
from typing import Iterator, Optional, Tuple

from customizer.src.models.parameter import (
    ParameterDefinition,
    ParameterType,
    StringValue,
    coerce_value,
)

logger = logging.getLogger(__name__)

LOCKED_FIELDS = ("name", "type")

def seed_parameters() -> Tuple[ParameterDefinition, ...]:
    """The list every session starts with: one locked nodeVersion entry."""
    return (
        ParameterDefinition(
            id=0,
            name="nodeVersion",
            type=ParameterType.STRING,
            default=StringValue(value="20.x"),
            is_fixed_name=True,
        ),
    )

class ParameterList:
    """
    Entries are frozen; every mutation swaps in a new tuple,
    so a snapshot taken for rendering never changes underneath.
    """

    def __init__(self, parameters: Optional[Tuple[ParameterDefinition, ...]] = None):
        self._parameters = seed_parameters() if parameters is None else tuple(parameters)

    def __iter__(self) -> Iterator[ParameterDefinition]:
        return iter(self._parameters)

    def __len__(self) -> int:
        return len(self._parameters)

    def snapshot(self) -> Tuple[ParameterDefinition, ...]:
        return self._parameters

    def get(self, param_id: int) -> Optional[ParameterDefinition]:
        for param in self._parameters:
            if param.id == param_id:
                return param
        return None

    def next_id(self) -> int:
        if not self._parameters:
            return 1
        return max(p.id for p in self._parameters) + 1

    def add(self) -> ParameterDefinition:
        """Append a blank string parameter named after its id."""
        param_id = self.next_id()
        param = ParameterDefinition(
            id=param_id,
            name=f"param{param_id}",
            type=ParameterType.STRING,
            default=StringValue(value=""),
        )
        self._parameters = self._parameters + (param,)
        logger.info(f"Added parameter {param.name} (id={param_id})")
        return param

    def update(self, param_id: int, field: str, raw_value: str) -> Optional[ParameterDefinition]:
        """
        Change one field of an entry.
        Returns the replacement entry, or None when nothing changed
        (unknown id or field, locked name/type, invalid type).
        """
        current = self.get(param_id)
        if current is None:
            logger.info(f"Ignoring update of unknown parameter id={param_id}")
            return None

        if field in LOCKED_FIELDS and current.is_fixed_name:
            logger.warning(f"Refusing to change {field} of fixed parameter {current.name}")
            return None

        if field == "name":
            updated = current.model_copy(update={"name": raw_value})
        elif field == "type":
            try:
                new_type = ParameterType(raw_value)
            except ValueError:
                logger.warning(f"Ignoring unknown parameter type '{raw_value}'")
                return None
            # Re-coerce so the default keeps matching the type
            updated = current.model_copy(update={
                "type": new_type,
                "default": coerce_value(new_type, current.default.as_text()),
            })
        elif field == "default":
            updated = current.model_copy(update={
                "default": coerce_value(current.type, raw_value),
            })
        else:
            logger.warning(f"Ignoring update of unknown field '{field}'")
            return None

        self._parameters = tuple(
            updated if p.id == param_id else p for p in self._parameters
        )
        return updated

    def remove(self, param_id: int) -> bool:
        remaining = tuple(p for p in self._parameters if p.id != param_id)
        removed = len(remaining) != len(self._parameters)
        self._parameters = remaining
        if removed:
            logger.info(f"Removed parameter id={param_id}")
        return removed
