"""
A run samples observations over a loop, derives a field from them at every
step and records each step into an :class:`~obslog.log.ObservationLog`.

Most users will want the `autolog` function, which builds the log and sampler
from the defaults in :mod:`obslog.conf` and returns the recorded history.
"""
from curvesim.logging import get_logger

from obslog.conf import DEFAULT_LOG_CONF, DEFAULT_SAMPLER_CONF
from obslog.iterators import NormalSampler
from obslog.log import ObservationLog
from obslog.pipelines import accumulate
from obslog.plot import make_history_plot


logger = get_logger(__name__)


def autolog(
    fields=None,
    derivation=None,
    *,
    seed=None,
    plot=False,
    save_as=None,
    **kwargs,
):
    """
    The autolog() function accumulates normally distributed observations into
    an observation log, deriving one field from the others at each step.

    Parameters
    ----------
    fields: iterable, optional
        Field declarations for the log. Defaults to `time`, `variable1`
        and `variable2`.

    derivation: dict or Derivation, optional
        Transformation applied at each step. Defaults to
        `derived_sum = variable1 + variable2`.

    seed: int, optional
        Seed for the sampler.

    plot: bool, default=False
        If true, also returns a chart of the history.

    save_as: str, optional
        Path to save the chart to. Implies `plot=True`.

    steps: int, default=100
        Number of observations to record.

    sampled: iterable of str, optional
        Fields drawn by the sampler. Defaults to the derivation inputs.

    mean, std, start, step:
        Passed to :class:`~obslog.iterators.NormalSampler`.

    Returns
    -------
    pandas.DataFrame, or (pandas.DataFrame, altair.Chart) if plotting.
    """
    fields = DEFAULT_LOG_CONF["fields"] if fields is None else fields
    if derivation is None and fields is DEFAULT_LOG_CONF["fields"]:
        derivation = DEFAULT_LOG_CONF["derivation"]

    log = ObservationLog(fields, derivation=derivation)
    sampler_kwargs = _parse_arguments(log, **kwargs)
    sampler = NormalSampler(seed=seed, **sampler_kwargs)

    df = accumulate(log, sampler)

    if plot or save_as:
        chart = make_history_plot(df, save_as=save_as)
        return df, chart

    return df


def _parse_arguments(log, **kwargs):
    input_args = ["steps", "sampled", "mean", "std", "start", "step"]

    for key in kwargs:
        if key not in input_args:
            raise TypeError(f"autolog() got an unexpected keyword argument '{key}'")

    sampler_kwargs = {k: v for k, v in DEFAULT_SAMPLER_CONF.items() if k != "fields"}
    sampler_kwargs.update({k: v for k, v in kwargs.items() if k != "sampled"})

    sampled = kwargs.get("sampled")
    if sampled is None:
        if log.derivation is not None:
            sampled = log.derivation.inputs
        else:
            sampled = [f for f in DEFAULT_SAMPLER_CONF["fields"] if f in log.fields]
    sampler_kwargs["fields"] = list(sampled)

    logger.debug("Sampler arguments: %s", sampler_kwargs)
    return sampler_kwargs
