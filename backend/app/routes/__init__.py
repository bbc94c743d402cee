# Routes package init
"""
Hauge API — API Routes Package
===============================

Route Inventory:
    - users.py:   /users, /users/{id}, /users/{id}/posts, /users/{id}/posts-with-user
    - posts.py:   GET /posts
    - auth.py:    POST /auth/register, POST /auth/login
    - health.py:  GET /health

Routes stay thin: read the request, run validators and the auth/ownership
checks, call a service, return its result.
"""
