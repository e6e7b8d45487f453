class FeatureGenerationError(Exception):
    """Base class for every failure on the prompt -> model -> parse path."""


class ModelInvocationError(FeatureGenerationError):
    """The model call itself failed (network, HTTP status, empty reply)."""


class ResponseDecodeError(FeatureGenerationError):
    """The model reply is not valid JSON."""


class ResponseShapeError(FeatureGenerationError):
    """The reply is valid JSON but not a list of feature descriptors."""
