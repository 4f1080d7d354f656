"""Errors raised while composing the static site graph."""


class CompositionError(Exception):
    """The site graph cannot be built in a valid order."""


class UnresolvedReferenceError(CompositionError):
    """A build step asked for a result it did not declare as a dependency."""

    def __init__(self, step: str, reference: str):
        self.step = step
        self.reference = reference
        super().__init__(
            f"Step '{step}' references '{reference}' which is not one of its "
            f"declared dependencies"
        )


class AssetSourceError(Exception):
    """The local directory holding the site assets is missing."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Site asset directory not found: {path}")
