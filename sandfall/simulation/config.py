"""Config — load world parameters and a starting scene from YAML.

The engine itself takes plain arguments; this module is the boundary
where human-written YAML is parsed into typed dataclasses and validated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from sandfall.world.materials import Material

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrushStroke:
    """One brush placement applied when a scene is built.

    Attributes:
        x: Centre column.
        y: Centre row.
        radius: Brush radius in cells.
        material: Material to paint.
    """

    x: int
    y: int
    radius: int
    material: Material

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> BrushStroke:
        """Build a stroke from a YAML mapping.

        Raises:
            ValueError: If the entry is not a mapping, a key is missing or
                malformed, or the material is unknown.
        """
        if not isinstance(data, dict):
            msg = f"brush entry {data!r} is not a mapping"
            raise ValueError(msg)
        try:
            return cls(
                x=int(data["x"]),
                y=int(data["y"]),
                radius=int(data.get("radius", 0)),
                material=Material.from_name(str(data["material"])),
            )
        except KeyError as exc:
            msg = f"brush entry {data!r} is missing {exc.args[0]!r}"
            raise ValueError(msg) from exc
        except TypeError as exc:
            msg = f"brush entry {data!r} has a non-numeric coordinate"
            raise ValueError(msg) from exc


@dataclass
class SimulationConfig:
    """Top-level simulation configuration.

    Attributes:
        seed: RNG seed for deterministic replay.
        world_width: Number of grid columns.
        world_height: Number of grid rows.
        ticks: Default number of ticks for a headless run.
        brushes: Strokes painted, in order, before the first tick.
    """

    seed: int = 42
    world_width: int = 80
    world_height: int = 40
    ticks: int = 200

    brushes: list[BrushStroke] = field(default_factory=list)

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ValueError: If a brush entry is malformed.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        brushes = [BrushStroke.from_mapping(b) for b in data.get("brushes", [])]
        config = cls(
            seed=data.get("seed", cls.seed),
            world_width=data.get("world_width", cls.world_width),
            world_height=data.get("world_height", cls.world_height),
            ticks=data.get("ticks", cls.ticks),
            brushes=brushes,
        )
        logger.info(
            "Loaded config %s (%dx%d, seed=%d, %d brushes)",
            path,
            config.world_width,
            config.world_height,
            config.seed,
            len(brushes),
        )
        return config
