"""Test public API surface - ensure imports work correctly and no side effects.

This test verifies:
- jsworkspace.api exposes discover, get_workspace
- The root package re-exports the result types
- _internal is not advertised as public
"""

import types


def test_api_exports_core_functions():
    """Test that jsworkspace.api exports discover and get_workspace."""
    from jsworkspace.api import discover, get_workspace

    assert isinstance(discover, types.FunctionType)
    assert isinstance(get_workspace, types.FunctionType)


def test_root_exports():
    import jsworkspace

    for name in ("discover", "get_workspace", "DiscoveryReport", "Found", "Broken", "Missing",
                 "PackageInfo", "WorkspaceStructure", "ErrorCode"):
        assert name in jsworkspace.__all__
        assert hasattr(jsworkspace, name)

    assert jsworkspace.get_workspace is jsworkspace.javascript.get_workspace


def test_internal_not_in_all():
    """_internal is importable for the package's own use but never advertised."""
    import jsworkspace
    import jsworkspace._internal.find  # noqa: F401

    assert "_internal" not in jsworkspace.__all__


def test_version_fallback():
    import jsworkspace

    assert isinstance(jsworkspace.__version__, str)
    assert jsworkspace.__version__
