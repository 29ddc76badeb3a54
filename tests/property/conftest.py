"""Hypothesis profiles for property-based tests."""

from hypothesis import HealthCheck, Verbosity, settings

settings.register_profile(
    "default",
    max_examples=100,
    deadline=5000,  # 5 seconds per example
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.data_too_large],
)

settings.register_profile(
    "fast",
    max_examples=25,
    deadline=2000,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.data_too_large],
)

settings.register_profile(
    "debug",
    max_examples=10,
    deadline=None,
    verbosity=Verbosity.verbose,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.data_too_large],
)

settings.load_profile("default")
