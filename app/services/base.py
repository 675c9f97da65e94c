"""
Base service - holds the injected collaborators shared by every service.
"""
from typing import Optional

from app.core.security import PasswordHasher
from app.repositories.interfaces import Repository


class BaseService:
    """Stateless coordinator between request data and the repository."""

    def __init__(self, repo: Repository, hasher: Optional[PasswordHasher] = None):
        if repo is None:
            raise ValueError("repository must be provided")
        self.repo = repo
        self.hasher = hasher or PasswordHasher()
