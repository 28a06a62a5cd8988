from .resolution_request_dto import ResolutionRequestDTO

__all__ = ["ResolutionRequestDTO"]
