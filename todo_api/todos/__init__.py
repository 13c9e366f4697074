"""
Todo API - Todos Module

CRUD for tasks owned by the authenticated user.
"""
