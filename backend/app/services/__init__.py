# Services package init
"""
Hauge API — Services Layer
===========================

Service Inventory:
    - validation:    payload validators returning ValidationResult
    - token_codec:   bearer token issue/verify (PyJWT)
    - passwords:     password hashing (passlib)
    - authorization: AuthContext and the ownership check
    - UserService:   user CRUD
    - PostService:   read-only post listings
    - AuthService:   registration and login
"""
