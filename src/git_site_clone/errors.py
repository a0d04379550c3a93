class GitSiteCloneError(Exception):
    pass


class ConfigCorruptError(GitSiteCloneError):
    pass


class ConfigWriteError(GitSiteCloneError):
    pass


class ClipboardUnavailableError(GitSiteCloneError):
    pass


class InvalidUrlError(GitSiteCloneError):
    pass


class CloneProcessError(GitSiteCloneError):
    """git clone exited with a non-zero status"""

    def __init__(self, returncode: int, message: str = ""):
        self.returncode = returncode
        super().__init__(message or f"git clone exited with status {returncode}")

    @property
    def exit_code(self) -> int:
        # killed by a signal
        if self.returncode < 0:
            return 1
        return min(self.returncode, 255)


class DirectoryChangeError(GitSiteCloneError):
    pass
