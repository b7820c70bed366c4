from .runner import configure_sshd

__all__ = ["configure_sshd"]
