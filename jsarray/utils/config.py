"""Configuration utilities."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from numbers import Real

import numpy as np

_LOGGER = logging.getLogger(__name__)

DTypeLike = str | type | np.dtype | None


@dataclass(frozen=True, slots=True)
class SequenceConfig:
    """Behavioural knobs for a :class:`~jsarray.core.sequence.Sequence`.

    Attributes
    ----------
    auto_extend_on_write : bool
        Grow the sequence when writing past its end (JavaScript ``a[99] = 1``).
        When ``False`` such writes raise ``SequenceIndexError``.
    growth_factor : float
        Capacity multiplier applied on relocation; at least ``2``.
    min_capacity : int
        Smallest capacity allocated once the buffer has to grow.
    dtype : str | numpy.dtype | None
        Element type of the backing array. ``None`` stores arbitrary objects.
    default_factory : Callable[[], object] | None
        Produces the value of synthesized slots in object buffers. Typed buffers
        always use the dtype's zero value.
    """

    auto_extend_on_write: bool = True
    growth_factor: float = 2.0
    min_capacity: int = 8
    dtype: DTypeLike = None
    default_factory: Callable[[], object] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.auto_extend_on_write, bool):
            msg = f"auto_extend_on_write must be a bool, got {type(self.auto_extend_on_write).__name__}"
            raise ValueError(msg)
        if isinstance(self.growth_factor, bool) or not isinstance(self.growth_factor, Real):
            msg = f"growth_factor must be a number, got {type(self.growth_factor).__name__}"
            raise ValueError(msg)
        if self.growth_factor < 2:
            msg = f"growth_factor must be at least 2, got {self.growth_factor}"
            raise ValueError(msg)
        if isinstance(self.min_capacity, bool) or not isinstance(self.min_capacity, int):
            msg = f"min_capacity must be an integer, got {type(self.min_capacity).__name__}"
            raise ValueError(msg)
        if self.min_capacity < 1:
            msg = f"min_capacity must be positive, got {self.min_capacity}"
            raise ValueError(msg)
        if self.default_factory is not None and not callable(self.default_factory):
            msg = "default_factory must be callable"
            raise ValueError(msg)
        if self.dtype is not None:
            try:
                np.dtype(self.dtype)
            except TypeError as exc:
                msg = f"Unsupported dtype: {self.dtype!r}"
                raise ValueError(msg) from exc

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(object) if self.dtype is None else np.dtype(self.dtype)

    def as_dict(self) -> dict[str, object]:
        return {
            "auto_extend_on_write": self.auto_extend_on_write,
            "growth_factor": self.growth_factor,
            "min_capacity": self.min_capacity,
            "dtype": None if self.dtype is None else str(self.numpy_dtype),
            "default_factory": self.default_factory,
        }

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object]) -> SequenceConfig:
        """Build a config from a plain mapping (e.g. parsed JSON).

        Unknown keys are dropped with a warning instead of failing the load.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            _LOGGER.warning("Ignoring unknown sequence config keys: %s", ", ".join(unknown))
        return cls(**{key: value for key, value in mapping.items() if key in known})
