"""lumen-particles - Floating particle field and ambient swarm for lumen."""
from __future__ import annotations

from lumen_particles.components import (
    FloatingConfig,
    FloatingParticle,
    FloatingState,
    Particle,
    SwarmConfig,
    SwarmState,
)
from lumen_particles.floating import FloatingField, spawn_trail, step_floating
from lumen_particles.swarm import Swarm, step_swarm

__all__ = [
    "FloatingConfig",
    "FloatingField",
    "FloatingParticle",
    "FloatingState",
    "Particle",
    "Swarm",
    "SwarmConfig",
    "SwarmState",
    "spawn_trail",
    "step_floating",
    "step_swarm",
]
