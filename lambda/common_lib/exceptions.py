"""
Exceptions raised by the booking workflow and turned into responses by business_logic_utils
"""


class BusinessLogicError(Exception):
    """Custom exception for business logic errors"""
    def __init__(self, message, status_code=400):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(Exception):
    """Custom exception for validation errors"""
    def __init__(self, message, field=None):
        self.message = message
        self.field = field
        super().__init__(self.message)


class ConfigurationError(Exception):
    """Raised when required server configuration is missing"""
    def __init__(self, message):
        self.message = message
        super().__init__(self.message)
