# inout/demo_config.py
"""
Load and validate YAML configurations for the cache timing demo.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from cerberus import Validator

from core.exceptions import ConfigError


# Cerberus schema for the demo configuration
DEMO_SCHEMA = {
    'demo': {
        'type': 'dict',
        'required': True,
        'schema': {
            'size': {'type': 'integer', 'coerce': int, 'min': 1, 'default': 500},
            'seed': {'type': 'integer', 'nullable': True, 'default': None},
            'dtype': {'type': 'string', 'allowed': ['float', 'complex'], 'default': 'float'},
            'repeats': {'type': 'integer', 'coerce': int, 'min': 1, 'default': 2},
            'solver': {
                'type': 'dict',
                'default': {},
                'schema': {
                    'assume_a': {'type': 'string', 'allowed': ['gen', 'sym', 'her', 'pos'],
                                 'default': 'gen'},
                    'check_finite': {'type': 'boolean', 'default': True},
                }
            },
        }
    }
}


@dataclass
class SolverOptions:
    assume_a: str = 'gen'
    check_finite: bool = True

    def as_kwargs(self) -> Dict[str, Any]:
        return {'assume_a': self.assume_a, 'check_finite': self.check_finite}


@dataclass
class DemoConfig:
    size: int = 500
    seed: Optional[int] = None
    dtype: str = 'float'
    repeats: int = 2
    solver: SolverOptions = field(default_factory=SolverOptions)


def load_demo_config(path: Path) -> DemoConfig:
    """
    Load a YAML demo configuration file, validate its schema, and return a DemoConfig.

    Raises:
        ConfigError: If the file cannot be read or parsed, or fails validation.
    """
    try:
        raw = yaml.safe_load(Path(path).read_text())
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read demo YAML '{path}': {e}") from e

    if raw is None:
        raw = {'demo': {}}
    if not isinstance(raw, dict):
        raise ConfigError(f"Demo YAML '{path}' must contain a mapping at top level")

    validator = Validator(DEMO_SCHEMA, allow_unknown=False)
    if not validator.validate(raw):
        raise ConfigError(f"Demo schema validation errors: {validator.errors}")
    doc: Dict[str, Any] = validator.document['demo']

    solver = doc.get('solver') or {}
    return DemoConfig(
        size=doc.get('size', 500),
        seed=doc.get('seed'),
        dtype=doc.get('dtype', 'float'),
        repeats=doc.get('repeats', 2),
        solver=SolverOptions(
            assume_a=solver.get('assume_a', 'gen'),
            check_finite=solver.get('check_finite', True),
        ),
    )
