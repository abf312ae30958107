from pathlib import Path

from libsysnr.exceptions import SysnrError


class RenderDataError(SysnrError):
    def __init__(self, *args: object, artifact: Path, reason: str) -> None:
        super().__init__(*args)
        self.artifact = artifact
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Failed to render artifact `{self.artifact}`!

{self.reason}

Probably this is not an user fault, but an internal bug.

{self.generic_error_name}"""


class ArtifactWriteError(SysnrError):
    def __init__(self, *args: object, path: Path, error: OSError) -> None:
        super().__init__(*args)
        self.path = path
        self.error = error

    def __repr__(self) -> str:
        return f"""Unable to write artifact `{self.path}`!

{self.error.strerror or self.error}

{self.generic_error_name}"""


class StaleArtifactError(SysnrError):
    def __init__(self, *args: object, paths: list[Path]) -> None:
        super().__init__(*args)
        self.paths = paths

    def __repr__(self) -> str:
        stale = "\n".join(f"\t{path}" for path in self.paths)
        return f"""Generated artifacts are not up to date:
{stale}

Run generator without check flag to regenerate them.

{self.generic_error_name}"""


class ArtifactReadError(SysnrError):
    def __init__(self, *args: object, path: Path, error: OSError) -> None:
        super().__init__(*args)
        self.path = path
        self.error = error

    def __repr__(self) -> str:
        return f"""Unable to read existing artifact `{self.path}` to check it!

{self.error.strerror or self.error}

{self.generic_error_name}"""
