"""
Schemas module - Request/Response schemas for API endpoints.

Request schemas validate what the API accepts (camelCase on the wire);
response schemas shape what it returns. Storage documents stay snake_case.
"""
