from pr_labeler.core.application.ports.local_repository_port import LocalRepositoryPort
from pr_labeler.core.application.ports.repository_port import RepositoryPort

__all__ = ["LocalRepositoryPort", "RepositoryPort"]
