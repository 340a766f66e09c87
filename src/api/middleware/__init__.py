"""
API Middleware - Request/response processing

Exception handlers that turn domain errors into JSON error responses.
"""
