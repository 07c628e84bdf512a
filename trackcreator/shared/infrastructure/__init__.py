from trackcreator.shared.infrastructure.api_client import ApiClient

__all__ = ['ApiClient']
