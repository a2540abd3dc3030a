"""
The accumulation pipeline: feed each observation from a sampler into an
:class:`~obslog.log.ObservationLog`, derive, and record.
"""

__all__ = ["accumulate"]

from curvesim.logging import get_logger

from obslog.conf import TIME_FIELD


logger = get_logger(__name__)


def accumulate(log, sampler, *, time_field=TIME_FIELD):
    """
    Runs the sampler through the log, recording one row per sample.

    Parameters
    ----------
    log : :class:`~obslog.log.ObservationLog`
        Log to accumulate into. Rows already recorded are kept.

    sampler : iterable
        Yields :class:`~obslog.iterators.ObservationSample` objects.

    time_field : str, default="time"
        Field that receives each sample's time. Skipped if the log does not
        declare it.

    Returns
    -------
    pandas.DataFrame
        The log's full history.
    """
    set_time = time_field in log.fields
    n_before = len(log)

    logger.info("Accumulating into %s", log)

    for sample in sampler:
        if set_time:
            log.set(time_field, sample.time)
        log.update(**sample.values)
        if log.derivation is not None:
            log.derive()
        log.record()

    logger.info("Recorded %d rows (%d total)", len(log) - n_before, len(log))

    return log.to_frame()
