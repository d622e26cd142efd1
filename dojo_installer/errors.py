from __future__ import annotations


class InstallerError(RuntimeError):
    """Base class for every failure the installer reports with exit status 1."""


class UnsupportedDistro(InstallerError):
    def __init__(self, distro: str):
        super().__init__(f"Distro identified ({distro}) is not supported")
        self.distro = distro


class NoCommandsForVersion(InstallerError):
    def __init__(self, family: str, version_id: str):
        super().__init__(f"No bootstrap commands for {family} version {version_id}")
        self.family = family
        self.version_id = version_id


class HardCommandFailure(InstallerError):
    def __init__(self, failure_message: str, instruction: str, returncode: int, output: str):
        super().__init__(failure_message)
        self.failure_message = failure_message
        self.instruction = instruction
        self.returncode = returncode
        self.output = output


class PythonVersionError(InstallerError):
    pass


class ConfigError(InstallerError):
    pass


class AmbiguousSourceSelector(ConfigError):
    def __init__(self, commit: str, branch: str):
        super().__init__(
            "Both source commit and branch have empty or nonsensical values configured. "
            f"Source commit was configured as {commit!r} and branch was configured as {branch!r}"
        )
        self.commit = commit
        self.branch = branch


class AcquisitionError(InstallerError):
    pass


class ReleaseDownloadError(AcquisitionError):
    pass


class ReleaseExtractError(AcquisitionError):
    pass


class RepositoryCloneError(AcquisitionError):
    pass


class RepositoryCheckoutError(AcquisitionError):
    pass
