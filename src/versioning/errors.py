"""Error types raised during preset resolution."""


class EnvGateError(Exception):
    """Base class for all resolution errors."""


class InvalidTargetVersion(EnvGateError, ValueError):
    """A target environment's minimum version is not valid semver."""

    def __init__(self, environment: str, version):
        self.environment = environment
        self.version = version
        super().__init__(
            f'Invalid version passed for target "{environment}": "{version}". '
            "Versions must be in semver format (major.minor.patch)"
        )


class InvalidCandidateVersion(EnvGateError, ValueError):
    """A support-table version cannot be normalized to semver."""

    def __init__(self, version):
        self.version = version
        super().__init__(
            f'Invalid version "{version}": expected semver (major.minor.patch) '
            "or a non-negative major version number"
        )


class UnknownIdentifier(EnvGateError, KeyError):
    """No transform unit is registered under the requested identifier."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(identifier)

    def __str__(self) -> str:
        return f'Unknown transform identifier: "{self.identifier}"'


class InvalidOptions(EnvGateError, ValueError):
    """Preset options failed validation."""
