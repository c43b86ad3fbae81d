#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Exception types raised by richtext.

Building a document reports misuse (wrong child kinds, malformed strict
tables, bad options) through the validation branch; rendering reports aborted
traversals and unusable outputs through the rendering branch. Catching
:class:`RichTextError` covers both.

Exception Hierarchy
-------------------
- RichTextError (base exception)

  - ValidationError (bad arguments or document structure)
    - InvalidOptionsError (options object of the wrong class for a renderer)
    - StructureError (child of a kind the container cannot hold)
      - TableShapeError (row cell count differs from header, strict tables)

  - RenderingError (render aborted or failed)
    - OutputWriteError (output could not be opened or written)

"""

from typing import Any


class RichTextError(Exception):
    """Root of the richtext exception hierarchy.

    Parameters
    ----------
    message : str
        Description of what went wrong
    original_error : Exception, optional
        Lower-level exception being wrapped

    Attributes
    ----------
    message : str
        Description of what went wrong
    original_error : Exception or None
        Lower-level exception being wrapped, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Store the message and the wrapped exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(RichTextError):
    """A value handed to richtext was rejected.

    Parameters
    ----------
    message : str
        Why the value was rejected
    parameter_name : str, optional
        Name of the offending argument
    parameter_value : any, optional
        The rejected value
    original_error : Exception, optional
        Lower-level exception being wrapped

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Record which argument was rejected."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """A renderer was constructed with another renderer's options class.

    Parameters
    ----------
    renderer_name : str
        Short name of the renderer, e.g. ``"markdown"``
    expected_type : type
        Options class the renderer accepts
    received_type : type
        Class of the object actually passed
    message : str, optional
        Overrides the generated message

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Build the message from the renderer and option types."""
        if message is None:
            message = (
                f"{renderer_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class StructureError(ValidationError):
    """A node was added to a container that cannot hold it.

    Parameters
    ----------
    container : str
        Name of the receiving container type
    child : Any
        The rejected child object
    message : str, optional
        Overrides the generated message

    """

    def __init__(self, container: str, child: Any, message: str | None = None):
        if message is None:
            message = f"{container} cannot contain {type(child).__name__}"
        super().__init__(message, parameter_name="child", parameter_value=child)
        self.container = container


class TableShapeError(StructureError):
    """A strict table received a row of the wrong width.

    Parameters
    ----------
    expected : int
        Number of columns defined by the table header
    received : int
        Number of cells in the rejected row

    """

    def __init__(self, expected: int, received: int, row: Any = None):
        super().__init__(
            "Table",
            row,
            message=f"Table row has {received} cells but the header defines {expected} columns",
        )
        self.expected = expected
        self.received = received


class RenderingError(RichTextError):
    """A render did not complete.

    Parameters
    ----------
    message : str
        Description of the failure
    rendering_stage : str, optional
        Where it failed: ``"traversal"`` for aborted walks, ``"file_write"``
        for output problems
    original_error : Exception, optional
        Lower-level exception being wrapped

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """The output could not be opened or written.

    Parameters
    ----------
    file_path : str
        Path, or stream description, of the output
    message : str, optional
        Overrides the generated message
    original_error : Exception, optional
        The ``OSError`` behind the failure, when there is one

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        if message is None:
            message = f"Failed to write output: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


__all__ = [
    "RichTextError",
    "ValidationError",
    "InvalidOptionsError",
    "StructureError",
    "TableShapeError",
    "RenderingError",
    "OutputWriteError",
]
