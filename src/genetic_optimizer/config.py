from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
import os
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from .genes import Gene, GeneKind


@dataclass
class RunConfig:
    population_size: int = 50
    epochs: int = 100
    num_parents: int = 5
    num_genes_to_modify: int = 1
    seed: Optional[int] = None
    genes: list[dict[str, Any]] = field(default_factory=list)

    def template(self) -> list[Gene]:
        """Build the initial gene vector described by ``genes``."""

        template = []
        for pos, spec in enumerate(self.genes):
            try:
                kind = GeneKind(str(spec.get("kind", "double")).lower())
            except ValueError:
                raise ValueError(f"gene {pos}: unknown kind {spec.get('kind')!r}") from None
            try:
                low, high = spec["min"], spec["max"]
            except KeyError as exc:
                raise ValueError(f"gene {pos}: missing {exc.args[0]!r}") from None
            if low > high:
                raise ValueError(f"gene {pos}: min {low} exceeds max {high}")
            template.append(Gene(kind, spec.get("value", low), low, high))
        return template


def load_run_config(path: str | Path = Path("conf/run.yaml")) -> RunConfig:
    """Load run parameters from YAML and environment variables.

    Environment variables prefixed with ``GA_`` override the YAML values.
    Missing fields fall back to dataclass defaults.
    """
    dotenv_path = Path(".env")
    if dotenv_path.exists():
        load_dotenv(dotenv_path=dotenv_path, override=False)

    cfg = RunConfig()
    cfg_path = Path(path)
    if cfg_path.exists():
        with open(cfg_path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        names = {f.name for f in fields(cfg)}
        for key, value in data.items():
            if key in names and value is not None:
                setattr(cfg, key, value)

    env_map = {
        "population_size": os.getenv("GA_POPULATION_SIZE"),
        "epochs": os.getenv("GA_EPOCHS"),
        "num_parents": os.getenv("GA_NUM_PARENTS"),
        "num_genes_to_modify": os.getenv("GA_NUM_GENES_TO_MODIFY"),
        "seed": os.getenv("GA_SEED"),
    }
    for key, val in env_map.items():
        if val is None:
            continue
        setattr(cfg, key, int(val))

    return cfg


__all__ = ["RunConfig", "load_run_config"]
