"""
Serialization helpers for ScalarVector values.

Provides explicit dict / JSON / YAML conversion via an intermediate dict
representation: {"x": <float>}.

Keys other than "x" (for example the y/z/w of a wider vector) are dropped
with a UserWarning, the same narrowing the conversions module applies.
"""
from __future__ import annotations

import json
import warnings
from typing import Any, Dict, Mapping

import yaml

from vector1.scalar_vector import ScalarVector


def scalar_vector_to_dict(v: ScalarVector) -> Dict[str, Any]:
    if not isinstance(v, ScalarVector):
        raise TypeError(f"Unsupported vector type: {type(v)}")
    return {"x": v.x}


def scalar_vector_from_dict(d: Mapping[str, Any]) -> ScalarVector:
    if not isinstance(d, Mapping):
        raise TypeError(f"Unsupported scalar vector dict type: {type(d)}")
    if "x" not in d:
        raise ValueError(f"Missing component 'x' in {dict(d)!r}")
    extra = sorted(str(k) for k in d if k != "x")
    if extra:
        warnings.warn(f"Discarding components {extra} of scalar vector", UserWarning)
    try:
        return ScalarVector(d["x"])
    except TypeError as e:
        raise ValueError(f"Invalid component 'x': {d['x']!r}") from e


def scalar_vector_to_json(v: ScalarVector) -> str:
    return json.dumps(scalar_vector_to_dict(v), sort_keys=True)


def scalar_vector_from_json(s: str) -> ScalarVector:
    d = json.loads(s)
    return scalar_vector_from_dict(d)


def scalar_vector_to_yaml(v: ScalarVector) -> str:
    return yaml.safe_dump(scalar_vector_to_dict(v))


def scalar_vector_from_yaml(s: str) -> ScalarVector:
    d = yaml.safe_load(s)
    return scalar_vector_from_dict(d)
