"""
Tests for the bintree package surface.
"""


class TestPackageExports:
    """Tests for names re-exported from bintree."""

    def test_version_is_string(self):
        import bintree

        assert isinstance(bintree.__version__, str)
        assert bintree.__version__

    def test_all_names_importable(self):
        import bintree

        for name in bintree.__all__:
            assert hasattr(bintree, name), f"bintree.{name} missing"

    def test_errors_subclass_builtins(self):
        from bintree import InvalidNodeError, SlotOccupiedError

        assert issubclass(InvalidNodeError, IndexError)
        assert issubclass(SlotOccupiedError, ValueError)
