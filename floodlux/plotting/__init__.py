from floodlux.plotting.isolux import plot_isolux

__all__ = ["plot_isolux"]
