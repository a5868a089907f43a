"""
Custom exceptions for the bacon_number package.
"""

class BaconNumberException(Exception):
    """Base exception for the application."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

class ActorNotFoundException(BaconNumberException):
    """Raised when a query endpoint has no matching actor in the graph."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Actor '{name}' not found in the collaboration graph.")

class NoPathException(BaconNumberException):
    """Raised when both actors exist but no chain of shared movies connects them."""
    def __init__(self, start: str, end: str):
        self.start = start
        self.end = end
        super().__init__(f"No connection between '{start}' and '{end}'.")

class DatasetNotFoundException(BaconNumberException):
    """Raised when the movie dataset file cannot be found."""
    pass
