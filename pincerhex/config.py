from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

import yaml

from pincerhex.potential import EvaluatorConfig


def load_yaml_config(path: Union[str, Path]) -> Dict:
    path = Path(path)
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level.")
    return data


def evaluator_config_from_dict(values: Optional[Mapping]) -> EvaluatorConfig:
    values = dict(values or {})
    known = {f.name for f in fields(EvaluatorConfig)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"Unknown evaluator settings: {', '.join(unknown)}")
    return EvaluatorConfig(**values)
