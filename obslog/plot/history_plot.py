import altair as alt
from pandas import DataFrame

from obslog.conf import TIME_FIELD
from obslog.exceptions import UnknownFieldError


def get_history_source(history, x=TIME_FIELD, y=None):
    """
    Returns the history in long form with columns `x`, "field" and "value".

    Parameters
    ----------
    history : :class:`~obslog.log.ObservationLog` or pandas.DataFrame
        Recorded observations.

    x : str, default="time"
        Column plotted on the x axis.

    y : list of str, optional
        Columns to plot. Defaults to every column except `x`.
    """
    df = history if isinstance(history, DataFrame) else history.to_frame()
    if x not in df.columns and df.index.name == x:
        df = df.reset_index()

    if x not in df.columns:
        raise UnknownFieldError(f"Column '{x}' not found in history.")

    y = [c for c in df.columns if c != x] if y is None else list(y)
    missing = [c for c in y if c not in df.columns]
    if missing:
        raise UnknownFieldError(f"Column(s) {missing} not found in history.")

    return df.melt(id_vars=[x], value_vars=y, var_name="field", value_name="value")


def make_history_plot(history, x=TIME_FIELD, y=None, save_as=None):
    """
    Returns and optionally saves a line chart of recorded fields over `x`.

    Parameters
    ----------
    history : :class:`~obslog.log.ObservationLog` or pandas.DataFrame
        Recorded observations.

    x : str, default="time"
        Column plotted on the x axis.

    y : list of str, optional
        Columns to plot. Defaults to every column except `x`.

    save_as : str, optional
        Path to save the chart to. Typically an .html file. See
        `Altair docs <https://altair-viz.github.io/user_guide/saving_charts.html>`_
        for additional options.

    Returns
    -------
    altair.Chart
    """
    source = get_history_source(history, x=x, y=y)
    chart = (
        alt.Chart(source)
        .mark_line()
        .encode(
            alt.X(f"{x}:Q").title(x),
            alt.Y("value:Q").title("Value"),
            alt.Color("field:N").title("Field"),
        )
        .properties(
            title=alt.TitleParams(
                text="Observation History",
                fontSize=16,
                align="left",
                anchor="start",
                offset=16,
            )
        )
    )

    if save_as:
        chart.save(save_as)

    return chart
