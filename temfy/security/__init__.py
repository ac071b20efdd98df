"""Password hashing and HTTP hardening helpers."""
