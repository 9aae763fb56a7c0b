from floodlux.metrics.statistics import StatisticsResult, compute_statistics, reduce_field

__all__ = ["StatisticsResult", "compute_statistics", "reduce_field"]
