"""Placeholder test verifying package import."""


def test_import() -> None:
    """Verify top-level package is importable."""
    import enum_tree

    assert enum_tree.__version__ is not None
    assert enum_tree.__version__ == "0.1.0"
