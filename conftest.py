def pytest_configure(config):
    config.addinivalue_line(
        "markers", "gpu: tests that need a CUDA device (deselect with -m 'not gpu')"
    )
