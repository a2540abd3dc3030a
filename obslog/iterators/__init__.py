__all__ = [
    "ObservationSample",
    "NormalSampler",
    "FrameSampler",
]

from .samplers import FrameSampler, NormalSampler, ObservationSample
