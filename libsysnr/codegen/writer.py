from pathlib import Path

from .exceptions import ArtifactReadError, ArtifactWriteError


def write_artifact(path: Path, content: str) -> None:
    """Write generated artifact, creating parent directories if required."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="\n") as f:
            f.write(content)
    except OSError as e:
        raise ArtifactWriteError(path=path, error=e) from e


def is_artifact_stale(path: Path, content: str) -> bool:
    """Check is artifact on disk differs from given content (or missing)."""
    if not path.is_file():
        return True
    try:
        return path.read_bytes() != content.encode("utf-8")
    except OSError as e:
        raise ArtifactReadError(path=path, error=e) from e
