"""Verify package imports work correctly."""


def test_import_taglex() -> None:
    """Test that taglex can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import taglex

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert taglex.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from taglex import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api() -> None:
    import taglex

    for name in taglex.__all__:
        assert hasattr(taglex, name), name
