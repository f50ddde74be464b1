"""Statistics for benchmark analysis: samples, percentiles, bootstrap, KDE, regression and outliers."""

__version__ = "0.1.0"
__all__ = ["bivariate", "bootstrap", "kde", "percentiles", "resamples", "sample", "tukey"]