from .wave import Wave, generate_wave, wave_size

__all__ = [
    "Wave",
    "generate_wave",
    "wave_size",
]
