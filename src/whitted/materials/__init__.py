"""Materials module.

Components:
    phong: Phong material (Ka, Kd, Ks, shininess) with reflection and
        refraction parameters, plus matte/mirror/glass presets
"""

from .phong import AIR_REFRACTION_INDEX, Material, glass, matte, mirror

__all__ = [
    "AIR_REFRACTION_INDEX",
    "Material",
    "matte",
    "mirror",
    "glass",
]
