#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the md2blocks library.

This module defines specialized exception classes for the error conditions
that can occur while turning Markdown into message blocks. Every error is
fatal to the transform call that raised it; there is no partial-result mode.

Exception Hierarchy
-------------------
- Md2BlocksError (base exception)

  - ValidationError (malformed or out-of-range input)
    - InvalidOptionsError (wrong options class for parser/renderer)
    - BlockLimitError (total block count ceiling exceeded)
    - RecursionLimitError (nesting depth ceiling exceeded)

  - ParseError (token structure the engine cannot interpret)

  - SecurityError (unsafe external content, e.g. dangerous URL scheme)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class Md2BlocksError(Exception):
    """Base exception class for all md2blocks-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    code : str, default "MD2BLOCKS_ERROR"
        Stable machine-readable error code
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    code : str
        The machine-readable error code
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, code: str = "MD2BLOCKS_ERROR", original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.code = code
        self.original_error = original_error


class ValidationError(Md2BlocksError):
    """Exception raised for malformed or out-of-range input.

    This exception covers validation errors such as:
    - Wrong argument type or empty required field
    - Size or count ceilings exceeded
    - Invalid table cell shape or alignment value

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    code : str, default "VALIDATION_ERROR"
        Machine-readable error code
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        code: str = "VALIDATION_ERROR",
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, code=code, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class BlockLimitError(ValidationError):
    """Exception raised when a transform would emit too many blocks.

    Parameters
    ----------
    block_count : int
        Number of blocks the transform produced
    max_blocks : int
        The configured block-count ceiling

    """

    def __init__(self, block_count: int, max_blocks: int):
        """Initialize the block limit error."""
        super().__init__(
            f"Block count {block_count} exceeds maximum of {max_blocks} blocks",
            parameter_name="block_count",
            parameter_value=block_count,
            code="BLOCK_LIMIT_EXCEEDED",
        )
        self.block_count = block_count
        self.max_blocks = max_blocks


class RecursionLimitError(ValidationError):
    """Exception raised when nesting exceeds the recursion ceiling.

    Parameters
    ----------
    depth : int
        Depth that was reached
    max_depth : int
        The recursion ceiling

    """

    def __init__(self, depth: int, max_depth: int):
        """Initialize the recursion limit error."""
        super().__init__(
            f"Recursion depth {depth} exceeds maximum of {max_depth}",
            parameter_name="depth",
            parameter_value=depth,
            code="RECURSION_LIMIT_EXCEEDED",
        )
        self.depth = depth
        self.max_depth = max_depth


class ParseError(Md2BlocksError):
    """Exception raised when upstream token structure cannot be interpreted.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    token_type : str, optional
        Type of the token (or node class name) that could not be handled
    original_error : Exception, optional
        The underlying exception that caused the failure

    """

    def __init__(self, message: str, token_type: str | None = None, original_error: Exception | None = None):
        """Initialize the parse error."""
        super().__init__(message, code="PARSE_ERROR", original_error=original_error)
        self.token_type = token_type


class SecurityError(Md2BlocksError):
    """Exception raised for unsafe external content.

    Currently raised when a block builder receives a URL with a dangerous
    scheme such as ``javascript:``.

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the security error."""
        super().__init__(message, code="SECURITY_ERROR", original_error=original_error)


class DependencyError(Md2BlocksError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the component requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The import error raised while probing for the package

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        self.original_import_error = original_import_error
        if message is None:
            message_parts = []

            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message_parts.append(f"{converter_name} requires the following packages: {pkg_list}")

            if version_mismatches:
                mismatch_str = ", ".join(
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                )
                message_parts.append(f"{converter_name} has version mismatches: {mismatch_str}")

            message = "\n".join(message_parts)

            all_packages = missing_packages + [(name, req) for name, req, _ in version_mismatches]
            if all_packages:
                packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in all_packages)
                message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message, code="DEPENDENCY_ERROR", original_error=original_import_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
