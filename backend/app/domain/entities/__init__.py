from .client import Client, ClientSummary, Project, ResolvedModel

__all__ = [
    "Client",
    "ClientSummary",
    "Project",
    "ResolvedModel",
]
