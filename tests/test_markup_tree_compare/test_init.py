"""Test module for markup_tree_compare package initialization."""


def test_package_import() -> None:
    """Test that the package can be imported successfully."""
    # Arrange & Act
    import markup_tree_compare

    # Assert
    assert markup_tree_compare is not None


def test_package_has_version() -> None:
    """Test that the package has a version attribute."""
    # Arrange & Act
    import markup_tree_compare

    # Assert
    assert isinstance(markup_tree_compare.__version__, str)
    assert markup_tree_compare.__version__ == "0.1.0"


def test_package_has_author() -> None:
    """Test that the package has an author attribute."""
    # Arrange & Act
    import markup_tree_compare

    # Assert
    assert markup_tree_compare.__author__ == "Markup Tree Compare Team"


def test_package_all_exports_resolve() -> None:
    """Test that every name in __all__ is importable from the package."""
    # Arrange & Act
    import markup_tree_compare

    # Assert
    for name in markup_tree_compare.__all__:
        assert hasattr(markup_tree_compare, name), name
    for name in ("parse", "included_node", "identical_nodes", "is_text_tag"):
        assert name in markup_tree_compare.__all__
