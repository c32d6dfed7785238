"""A small shell, a dining-philosophers simulation and animal class demos."""

__version__ = "0.1.0"
__all__ = ["animals", "philo", "shell"]