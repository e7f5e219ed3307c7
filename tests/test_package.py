"""Basic tests for udotenv package."""


def test_import_udotenv():
    """Test that udotenv can be imported."""
    import udotenv

    assert hasattr(udotenv, "__version__")
    assert udotenv.__version__ == "1.0.0"


def test_version_format():
    """Test that version follows semver format."""
    import udotenv

    parts = udotenv.__version__.split(".")
    assert len(parts) == 3
    assert all(p.isdigit() for p in parts)


def test_public_api_exports():
    """Test that the entry points are re-exported at package level."""
    import udotenv

    for name in ("new", "load_from_args", "preprocess_args", "Config", "EnvFileLoader"):
        assert name in udotenv.__all__
        assert hasattr(udotenv, name)
