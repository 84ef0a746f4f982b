"""Top-level package for the Token Merge Tutor.

Provides subpackages:
- tokenmerge.core – immutable models, schema validation, serialization
- tokenmerge.curriculum – the rule catalog and curriculum loading
- tokenmerge.engine – availability filter, merge engine, step controller
- tokenmerge.scoring – the scoring collaborator interface
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("tokenmerge-tutor")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

from .engine import TokenizationSession, create_session, SessionConfig
from .errors import InvalidStepError

__all__: list[str] = [
    "__version__",
    "TokenizationSession",
    "create_session",
    "SessionConfig",
    "InvalidStepError",
]
