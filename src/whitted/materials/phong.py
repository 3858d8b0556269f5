"""Phong surface material.

A material stores the coefficients of the Phong reflection model together
with the two scalars that drive the recursive rays:

- ka, kd, ks: ambient, diffuse and specular RGB coefficients
- shininess: exponent of the specular lobe
- reflection_intensity: attenuation applied to both reflected and refracted
  recursive contributions
- transparent / refraction_index: whether refraction rays are spawned and the
  index of refraction of the material's interior (the outside is air, 1.0)

Common refraction indices:
    - Air: 1.0
    - Water: 1.33
    - Glass: 1.5
    - Diamond: 2.4

Example:
    >>> from whitted.materials.phong import Material
    >>> glass = Material(kd=(0.1, 0.1, 0.1), transparent=True, refraction_index=1.5)
    >>> glass.refraction_index
    1.5
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from whitted.core.vector import Vec3, as_vec3

if TYPE_CHECKING:
    from whitted.core.ray import Hit

# Refractive index of the medium surrounding every surface
AIR_REFRACTION_INDEX = 1.0


def _color(value) -> Vec3:
    color = as_vec3(value)
    color.setflags(write=False)
    return color


@dataclass(frozen=True, eq=False)
class Material:
    """Phong material properties.

    Attributes:
        ka: Ambient coefficient (RGB).
        kd: Diffuse coefficient (RGB).
        ks: Specular coefficient (RGB).
        shininess: Specular exponent, non-negative.
        reflection_intensity: Scalar in [0, 1] attenuating recursive rays.
        transparent: Whether the surface transmits refracted rays.
        refraction_index: Index of refraction of the material, positive.
    """

    ka: Vec3 = (0.1, 0.1, 0.1)
    kd: Vec3 = (0.7, 0.7, 0.7)
    ks: Vec3 = (0.7, 0.7, 0.7)
    shininess: float = 10.0
    reflection_intensity: float = 0.3
    transparent: bool = False
    refraction_index: float = 1.5

    def __post_init__(self) -> None:
        # Coerce tuples to read-only arrays; the dataclass itself is frozen
        object.__setattr__(self, "ka", _color(self.ka))
        object.__setattr__(self, "kd", _color(self.kd))
        object.__setattr__(self, "ks", _color(self.ks))

        if self.shininess < 0:
            raise ValueError(f"shininess must be non-negative, got {self.shininess}")
        if not 0.0 <= self.reflection_intensity <= 1.0:
            raise ValueError(
                f"reflection_intensity must be in [0, 1], got {self.reflection_intensity}"
            )
        if self.refraction_index <= 0:
            raise ValueError(
                f"refraction_index must be positive, got {self.refraction_index}"
            )

    def n1(self, hit: Hit) -> float:
        """Refractive index on the incident side of the hit."""
        return self.refraction_index if hit.within else AIR_REFRACTION_INDEX

    def n2(self, hit: Hit) -> float:
        """Refractive index on the transmitted side of the hit."""
        return AIR_REFRACTION_INDEX if hit.within else self.refraction_index

    def __repr__(self) -> str:
        return (
            f"Material(ka={self.ka.tolist()}, kd={self.kd.tolist()}, "
            f"ks={self.ks.tolist()}, shininess={self.shininess}, "
            f"reflection_intensity={self.reflection_intensity}, "
            f"transparent={self.transparent}, refraction_index={self.refraction_index})"
        )


# =============================================================================
# Material presets
# =============================================================================


def matte(color: tuple[float, float, float]) -> Material:
    """A dull, non-reflective material of the given diffuse color."""
    rgb = np.asarray(color, dtype=np.float64)
    return Material(
        ka=tuple(0.1 * rgb),
        kd=tuple(rgb),
        ks=(0.05, 0.05, 0.05),
        shininess=5.0,
        reflection_intensity=0.0,
    )


def mirror(tint: tuple[float, float, float] = (0.9, 0.9, 0.9)) -> Material:
    """A highly reflective material with a tight highlight."""
    return Material(
        ka=(0.0, 0.0, 0.0),
        kd=(0.05, 0.05, 0.05),
        ks=tint,
        shininess=200.0,
        reflection_intensity=0.9,
    )


def glass(refraction_index: float = 1.5) -> Material:
    """A transparent material refracting with the given index."""
    return Material(
        ka=(0.0, 0.0, 0.0),
        kd=(0.05, 0.05, 0.05),
        ks=(0.8, 0.8, 0.8),
        shininess=100.0,
        reflection_intensity=0.5,
        transparent=True,
        refraction_index=refraction_index,
    )
