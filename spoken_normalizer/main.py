from spoken_normalizer.api.main import app

__all__ = ["app"]
