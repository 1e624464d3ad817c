from hypothesis import HealthCheck, settings

pytest_plugins = [
    "fixtures.general",
    "fixtures.w3",
    "fixtures.tokens",
]

settings.register_profile(
    "ammcat",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
    deadline=None,
)
settings.load_profile("ammcat")
