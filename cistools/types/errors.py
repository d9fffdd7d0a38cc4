"""
Error types and error codes for cistools.
Provides structured error handling across all packages.
"""

from enum import Enum
from typing import Dict, Any, Optional


class ErrorCode(str, Enum):
    """Standard error codes used across cistools."""
    INVALID_PARAMETER = "invalid_parameter"
    CONFIGURATION_ERROR = "configuration_error"
    INTERNAL_ERROR = "internal_error"
    
    def __str__(self) -> str:
        return self.value


# Error code constants for easy import
INVALID_PARAMETER = ErrorCode.INVALID_PARAMETER
CONFIGURATION_ERROR = ErrorCode.CONFIGURATION_ERROR
INTERNAL_ERROR = ErrorCode.INTERNAL_ERROR


class CisToolsError(Exception):
    """Base exception for all cistools errors."""
    
    def __init__(
        self,
        message: str,
        error_code: ErrorCode = INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            'error': self.error_code.value,
            'message': self.message,
            'details': self.details
        }
        
        if self.cause:
            result['cause'] = str(self.cause)
        
        return result
    
    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


class InvalidParameterError(CisToolsError):
    """
    Raised when the parameters of a call can not be satisfied.

    This is always a bug in the calling code, so it is raised immediately
    and never retried.
    """
    
    def __init__(
        self,
        message: str,
        parameter: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(f"Invalid parameter: {message}", INVALID_PARAMETER, details)
        self.parameter = parameter
        self.value = value
        
        if parameter:
            self.details['parameter'] = parameter
        if value is not None:
            self.details['value'] = str(value)


class ConfigurationError(CisToolsError):
    """Raised when there's a configuration error."""
    
    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, CONFIGURATION_ERROR, details)
        self.config_key = config_key
        self.config_value = config_value
        
        if config_key:
            self.details['config_key'] = config_key
        if config_value is not None:
            self.details['config_value'] = str(config_value)
