from bloomkit.analysis.benchmark import FppReport, measure_fpp

__all__ = ["FppReport", "measure_fpp"]
