__all__ = ["make_history_plot", "get_history_source"]

from .history_plot import get_history_source, make_history_plot
