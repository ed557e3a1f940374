def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: reference-scale runs (deselect with '-m \"not slow\"')"
    )
