"""Users app package.

Defines the custom user model (email login, salted password hashes) and
the authentication endpoints. Use ``apps.users.models.CustomUser`` as the
AUTH_USER_MODEL throughout the project.
"""
