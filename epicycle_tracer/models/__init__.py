from .spectrum import FrequencyComponent, Spectrum
from .state import AnimationState, TracedPath
from .profile import TracerProfile

__all__ = [
    "FrequencyComponent",
    "Spectrum",
    "AnimationState",
    "TracedPath",
    "TracerProfile",
]
