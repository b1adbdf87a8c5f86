"""Common error handling for all services"""

class ServiceError(Exception):
    """Base exception for all service errors"""
    pass

class SessionError(ServiceError):
    """Raised when a session operation is issued from the wrong screen"""
    pass

class NavigationError(ServiceError):
    """Raised for unknown screen transitions or incomplete forms"""
    pass

class IncompleteFormError(NavigationError):
    """Raised when a form is submitted without its required fields"""
    pass

class ChatError(ServiceError):
    """Base exception for chat-related errors"""
    pass

class StorageError(ServiceError):
    """Base exception for local storage errors"""
    pass

class ConfigError(ServiceError):
    """Base exception for configuration errors"""
    pass
