pytest_plugins = [
    "tests.fixtures.gateway_fixtures",
]
