"""Global pytest fixtures for WoofAreYou."""

pytest_plugins = [
    "tests.fixtures.datagen",
]
