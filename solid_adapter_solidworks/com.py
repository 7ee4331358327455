"""COM marshaling helpers for late-bound SolidWorks calls.

SolidWorks methods with ``out``/``ref`` integer parameters (OpenDoc6, SaveAs,
LoadFile4) need explicit by-reference VARIANTs under win32com, and several
methods want a typed null dispatch instead of a Python None.
"""

from typing import Any

# Try to import win32com for COM automation
SOLIDWORKS_AVAILABLE = False

try:
    import pythoncom
    import win32com.client

    SOLIDWORKS_AVAILABLE = True
except ImportError:
    pythoncom = None  # type: ignore[assignment]
    win32com = None  # type: ignore[assignment]


def require_com() -> None:
    """Raise ImportError if pywin32 is not installed."""
    if not SOLIDWORKS_AVAILABLE:
        raise ImportError(
            "win32com is not available. Install pywin32: pip install pywin32"
        )


def by_ref_int(value: int = 0) -> Any:
    """A by-reference int VARIANT for out parameters; read back with ``.value``."""
    require_com()
    return win32com.client.VARIANT(pythoncom.VT_BYREF | pythoncom.VT_I4, value)


def null_dispatch() -> Any:
    """Typed null dispatch for optional object parameters (callouts, export data)."""
    if not SOLIDWORKS_AVAILABLE:
        return None
    return win32com.client.VARIANT(pythoncom.VT_DISPATCH, None)


def double_array(values) -> Any:
    """SAFEARRAY of doubles, as expected by MathUtility.CreatePoint."""
    values = [float(v) for v in values]
    if not SOLIDWORKS_AVAILABLE:
        return values
    return win32com.client.VARIANT(pythoncom.VT_ARRAY | pythoncom.VT_R8, values)


def ref_value(ref: Any) -> int:
    """Read an out parameter filled by a COM call."""
    return int(getattr(ref, "value", ref) or 0)


def init_com() -> None:
    """Initialize COM for the current thread."""
    if SOLIDWORKS_AVAILABLE:
        pythoncom.CoInitialize()


def uninit_com() -> None:
    """Uninitialize COM for the current thread."""
    if SOLIDWORKS_AVAILABLE:
        pythoncom.CoUninitialize()


def get_com_result(obj: Any, attr_name: str) -> Any:
    """Get a COM result, handling both property and method access.

    In win32com late binding, some methods are exposed as properties
    that return tuples instead of callable methods.
    """
    attr = getattr(obj, attr_name, None)
    if attr is None:
        return None
    # If it's callable (a method), call it
    if callable(attr):
        try:
            return attr()
        except TypeError:
            # If calling fails, it might be a property that looks callable
            return attr
    # It's a property, return its value directly
    return attr


def as_list(com_array: Any) -> list:
    """Turn a COM SAFEARRAY result (tuple or None) into a list."""
    if com_array is None:
        return []
    if isinstance(com_array, (list, tuple)):
        return list(com_array)
    return [com_array]
