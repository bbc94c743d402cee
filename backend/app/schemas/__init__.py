# Schemas package init
"""
Hauge API — Request/Response Schemas
=====================================

Schema Inventory:
    - user:   UserCreate, UserUpdate, UserResponse
    - auth:   RegisterRequest, LoginRequest, AuthResponse
    - post:   PostResponse, PostWithUserResponse
    - common: ErrorResponse, HealthResponse
"""
