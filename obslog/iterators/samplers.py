"""
Iterators that yield one observation per time step for
:func:`~obslog.pipelines.accumulate`.
"""
import numpy as np

from curvesim.logging import get_logger
from curvesim.utils import dataclass

from obslog.exceptions import UnknownFieldError


logger = get_logger(__name__)


@dataclass(slots=True)
class ObservationSample:
    """
    Attributes
    -----------
    time : int or float
        Time step of the observation.
    values : dict
        Observed value for each sampled field.
    """

    time: object
    values: dict


class NormalSampler:
    """
    An iterator that draws each field from a normal distribution at every step.
    """

    def __init__(
        self,
        fields,
        steps,
        *,
        mean=0.0,
        std=1.0,
        start=0,
        step=1,
        seed=None,
    ):
        """
        Parameters
        ----------
        fields: iterable of str
            Names of the fields to sample.

        steps: int
            Number of samples to yield.

        mean: float or dict, default=0.0
            Mean of the distribution, or a dict of per-field means.

        std: float or dict, default=1.0
            Standard deviation, or a dict of per-field standard deviations.

        start: int, default=0
            Time of the first sample.

        step: int, default=1
            Time increment between samples.

        seed: int, optional
            Seed for `numpy.random.default_rng`; the same seed yields
            the same samples.
        """
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")

        self.fields = list(fields)
        self.steps = steps
        self.means = self._per_field(mean, "mean")
        self.stds = self._per_field(std, "std")
        self.start = start
        self.step = step
        self.seed = seed

    def _per_field(self, value, name):
        if isinstance(value, dict):
            unknown = set(value) - set(self.fields)
            if unknown:
                raise UnknownFieldError(f"{name} given for unsampled field(s) {sorted(unknown)}")
            return np.array([value.get(f, 0.0 if name == "mean" else 1.0) for f in self.fields])
        return np.full(len(self.fields), value, dtype=float)

    def __iter__(self):
        rng = np.random.default_rng(self.seed)
        draws = rng.normal(self.means, self.stds, size=(self.steps, len(self.fields)))
        times = self.start + self.step * np.arange(self.steps)

        for t, row in zip(times, draws):
            yield ObservationSample(t.item(), dict(zip(self.fields, row.tolist())))

    def __len__(self):
        return self.steps


class FrameSampler:
    """
    An iterator that replays the rows of a DataFrame as observations.
    """

    def __init__(self, frame, time_column=None):
        """
        Parameters
        ----------
        frame: pandas.DataFrame
            One row per observation, one column per field.

        time_column: str, optional
            Column holding the time of each row. Defaults to the index.
        """
        if time_column is not None and time_column not in frame.columns:
            raise UnknownFieldError(f"Column '{time_column}' not found in frame.")

        self.frame = frame
        self.time_column = time_column

    def __iter__(self):
        if self.time_column is None:
            times = self.frame.index
            data = self.frame
        else:
            times = self.frame[self.time_column]
            data = self.frame.drop(columns=[self.time_column])

        for t, (_, row) in zip(times, data.iterrows()):
            yield ObservationSample(t, row.to_dict())

    def __len__(self):
        return len(self.frame)
